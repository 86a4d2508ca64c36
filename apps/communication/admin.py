from django.contrib import admin
from django.utils.translation import gettext_lazy as _
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'notification_type', 'is_read', 'created_at')
    list_filter = ('notification_type', 'is_read', 'created_at')
    search_fields = ('title', 'message', 'user__email')
    readonly_fields = ('read_at', 'created_at', 'updated_at')
    raw_id_fields = ('user',)
    actions = ['mark_as_read']

    @admin.action(description=_('Mark selected notifications as read'))
    def mark_as_read(self, request, queryset):
        for notification in queryset:
            notification.mark_as_read()
