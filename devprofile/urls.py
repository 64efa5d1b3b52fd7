"""
URL configuration for devprofile project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from accounts.views import UserViewSet
from resumes.views import ResumeViewSet

# Create router and register viewsets
router = DefaultRouter()
router.register(r'users', UserViewSet, basename='user')
router.register(r'resume', ResumeViewSet, basename='resume')

urlpatterns = [
    # Frontend views
    path('export/', include('exports.frontend_urls')),

    # API views
    path('admin/', admin.site.urls),
    path('api/', include(router.urls)),
    path('api/', include('accounts.urls')),
    path('api/', include('resumes.urls')),
    path('api/', include('exports.urls')),
    path('api-auth/', include('rest_framework.urls')),
]
