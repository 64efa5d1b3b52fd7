"""
Frontend URLs for exports app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('banner/', frontend_views.banner_page, name='export-banner-page'),
]
