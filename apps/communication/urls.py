"""Communication URLs."""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views_api

api_router = DefaultRouter()
api_router.register(r'notifications', views_api.NotificationViewSet, basename='notification')

api_urlpatterns = [path('', include(api_router.urls))]
