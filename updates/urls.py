# updates/urls.py
from django.urls import path

from . import views

urlpatterns = [
    path('api/updates/check', views.UpdateCheckView.as_view(), name='update-check'),
    path('api/version/<str:app>', views.VersionInfoView.as_view(), name='version-info'),
    path('api/apps', views.AppListView.as_view(), name='app-list'),
    path('api/admin/publish', views.PublishVersionView.as_view(), name='admin-publish'),
    path('api/admin/stats', views.StatsView.as_view(), name='admin-stats'),
    path('api/webhook/release', views.WebhookReleaseView.as_view(), name='webhook-release'),
    path('health', views.HealthView.as_view(), name='health'),
]
