from django.urls import path

from core.resources import collection_view, detail_view
from . import api

app_name = 'academics'

urlpatterns = [
    # Classes
    path('academics/classes', collection_view(api.classes), name='classes'),
    path('academics/classes/<int:pk>', detail_view(api.classes), name='class_detail'),

    # Sections
    path('academics/sections', collection_view(api.sections), name='sections'),
    path('academics/sections/<int:pk>', detail_view(api.sections), name='section_detail'),

    # Subjects
    path('academics/subjects', collection_view(api.subjects), name='subjects'),
    path('academics/subjects/<int:pk>', detail_view(api.subjects), name='subject_detail'),

    # Timetable
    path('academics/timetable', collection_view(api.timetable), name='timetable'),
    path('academics/timetable/<int:pk>', detail_view(api.timetable), name='timetable_detail'),
]
