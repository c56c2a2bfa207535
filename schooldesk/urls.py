"""
URL configuration for the schooldesk project.

Every route lives under /api/ and answers JSON; paths carry no trailing slash.
"""
from django.urls import path, include

urlpatterns = [
    path('api/', include('schools.urls', namespace='schools')),
    path('api/', include('academics.urls', namespace='academics')),
    path('api/', include('staff.urls', namespace='staff')),
    path('api/', include('students.urls', namespace='students')),
    path('api/', include('events.urls', namespace='events')),
    path('api/', include('library.urls', namespace='library')),
    path('api/', include('front_office.urls', namespace='front_office')),
    path('api/', include('attendance.urls', namespace='attendance')),
]
