from django.urls import path

from core.resources import collection_view, detail_view
from . import api

app_name = 'events'

urlpatterns = [
    path('events', collection_view(api.events), name='list'),
    path('events/<int:pk>', detail_view(api.events), name='detail'),

    # Notice board
    path('events/notices', collection_view(api.notices), name='notices'),
    path('events/notices/<int:pk>', detail_view(api.notices), name='notice_detail'),
]
