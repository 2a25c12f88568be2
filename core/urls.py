"""
URL configuration for the Kirk API.

Analytics reads live under /api/v1/analytics/, channel account administration
under /api/v1/<account-type>/ and token handling under /api/v1/auth/.
"""

from django.contrib import admin
from django.urls import path
from django.urls import include
from django.http import JsonResponse
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView


def home_view(request):
    return JsonResponse({
        "message": "Kirk Analytics API",
        "status": "running",
        "endpoints": {
            "admin": "/admin/",
            "api": "/api/v1/",
            "docs": "/api/docs/",
            "schema": "/api/schema/"
        }
    })


urlpatterns = [
    path("", home_view, name="home"),
    path("admin/", admin.site.urls),
    path("api/v1/auth/", include("apps.authentication.urls")),
    path("api/v1/analytics/", include("apps.analytics.urls")),
    path("api/v1/", include("apps.email_marketing.urls")),
    path("api/v1/", include("apps.direct_mail.urls")),
    path("api/v1/", include("apps.paid_media.urls")),
    path("api/v1/", include("apps.web_analytics.urls")),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
