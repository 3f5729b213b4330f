# updates/admin.py

from django.contrib import admin
from .models import AppVersion


@admin.register(AppVersion)
class AppVersionAdmin(admin.ModelAdmin):
    list_display = [
        'app',
        'latest_version',
        'minimum_version',
        'critical',
        'release_date',
        'get_status'
    ]

    list_filter = [
        'critical',
        'release_date'
    ]

    search_fields = ['app', 'latest_version']

    readonly_fields = ['created_at', 'updated_at']

    list_editable = ['critical']

    ordering = ['app']

    fieldsets = (
        ('Release', {
            'fields': ('app', 'latest_version', 'minimum_version', 'critical'),
            'classes': ('wide',)
        }),
        ('Distribution', {
            'fields': ('release_date', 'download_url', 'release_notes', 'changelog'),
            'classes': ('wide',)
        }),
        ('System', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def get_status(self, obj):
        if obj.critical:
            return "🔴 critical below minimum"
        return "🟢 optional"

    get_status.short_description = 'Status'
    get_status.admin_order_field = 'critical'

    actions = ['make_critical', 'make_optional']

    def make_critical(self, request, queryset):
        updated = queryset.update(critical=True)
        self.message_user(request, f"{updated} release(s) marked critical")

    make_critical.short_description = "Mark selected releases critical"

    def make_optional(self, request, queryset):
        updated = queryset.update(critical=False)
        self.message_user(request, f"{updated} release(s) marked optional")

    make_optional.short_description = "Mark selected releases optional"


admin.site.site_header = "Update Server"
admin.site.site_title = "Update Server Admin"
admin.site.index_title = "Published releases"
