# updateserver/urls.py
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('updates.urls')),
]

handler404 = 'updates.views.endpoint_not_found'
handler500 = 'updates.views.server_error'
