"""Planning Présentoirs URL configuration with namespaced API routing."""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from apps.scheduling.urls import api_urlpatterns as scheduling_api
from apps.registrations.urls import api_urlpatterns as registrations_api
from apps.communication.urls import api_urlpatterns as communication_api
from apps.reports.urls import api_urlpatterns as reports_api


api_v1_patterns = [
    path('scheduling/', include((scheduling_api, 'scheduling'))),
    path('registrations/', include((registrations_api, 'registrations'))),
    path('communication/', include((communication_api, 'communication'))),
    path('reports/', include((reports_api, 'reports'))),
]


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include((api_v1_patterns, 'api'), namespace='v1')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
