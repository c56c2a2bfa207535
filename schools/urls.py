from django.urls import path
from . import views

app_name = 'schools'

urlpatterns = [
    path('schools/public', views.public_school_list_view, name='public'),
    path('schools/settings', views.school_settings_view, name='settings'),
]
