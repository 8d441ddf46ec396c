"""Reports URLs."""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views_api

api_router = DefaultRouter()
api_router.register(r'reports', views_api.ReportViewSet, basename='report')

api_urlpatterns = [path('', include(api_router.urls))]
