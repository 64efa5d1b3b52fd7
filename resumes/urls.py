"""
Resumes app URLs
"""
from django.urls import path

from .views import OnboardingStatusView, OnboardingView, public_resume

urlpatterns = [
    path('public/<str:username>/', public_resume, name='public-resume'),
    path('onboarding/', OnboardingView.as_view(), name='onboarding'),
    path('onboarding/status/', OnboardingStatusView.as_view(), name='onboarding-status'),
]
