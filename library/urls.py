from django.urls import path

from core.resources import collection_view, detail_view
from . import api, views

app_name = 'library'

urlpatterns = [
    # Books
    path('library/books', collection_view(api.books), name='books'),
    path('library/books/<int:pk>', detail_view(api.books), name='book_detail'),

    # Issues
    path('library/issues', collection_view(api.book_issues), name='issues'),
    path('library/issues/<int:pk>', detail_view(api.book_issues), name='issue_detail'),
    path('library/issues/<int:pk>/return', views.book_return_view, name='issue_return'),
]
