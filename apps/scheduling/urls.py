"""Scheduling URLs."""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views_api

api_router = DefaultRouter()
api_router.register(r'activity-types', views_api.ActivityTypeViewSet, basename='activity-type')
api_router.register(r'slots', views_api.SlotViewSet, basename='slot')

api_urlpatterns = [path('', include(api_router.urls))]
