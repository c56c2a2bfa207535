from django.urls import path

from core.resources import collection_view, detail_view
from . import api, views

app_name = 'front_office'

urlpatterns = [
    # Visitors
    path('front-office/visitors', collection_view(api.visitors), name='visitors'),
    path('front-office/visitors/<int:pk>', detail_view(api.visitors), name='visitor_detail'),
    path('front-office/visitors/<int:pk>/checkout', views.visitor_checkout_view, name='visitor_checkout'),

    # Enquiries
    path('front-office/enquiries', collection_view(api.enquiries), name='enquiries'),
    path('front-office/enquiries/<int:pk>', detail_view(api.enquiries), name='enquiry_detail'),
]
