"""
Accounts app URLs
"""
from django.urls import path

from .views import FullPreferencesView, PreferencesView, SignupView

urlpatterns = [
    path('auth/signup/', SignupView.as_view(), name='signup'),
    path('user/preferences/', PreferencesView.as_view(), name='user-preferences'),
    path('user/preferences/full/', FullPreferencesView.as_view(), name='user-preferences-full'),
]
