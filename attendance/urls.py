from django.urls import path

from core.resources import collection_view, detail_view
from . import api, views

app_name = 'attendance'

urlpatterns = [
    path('attendance/students', views.student_attendance_view, name='students'),
    path('attendance/records', collection_view(api.attendance_records), name='records'),
    path('attendance/records/<int:pk>', detail_view(api.attendance_records), name='record_detail'),
]
