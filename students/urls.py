from django.urls import path

from core.resources import collection_view, detail_view
from . import api, views

app_name = 'students'

urlpatterns = [
    path('students', collection_view(api.students), name='list'),
    path('students/generate-admission-no', views.generate_admission_no_view, name='generate_admission_no'),
    path('students/import', views.student_import_view, name='import'),
    path('students/<int:pk>', detail_view(api.students), name='detail'),
]
