from django.urls import path

from core.resources import collection_view, detail_view
from . import api, views

app_name = 'staff'

urlpatterns = [
    path('staff', collection_view(api.staff), name='list'),
    path('staff/generate-id', views.generate_employee_id_view, name='generate_id'),
    path('staff/<int:pk>', detail_view(api.staff), name='detail'),

    # Departments
    path('staff/departments', collection_view(api.departments), name='departments'),
    path('staff/departments/<int:pk>', detail_view(api.departments), name='department_detail'),
]
