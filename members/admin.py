from django.contrib import admin

from members.models import Member


class MemberAdmin(admin.ModelAdmin):
    fields = ["user_id", "user_name", "user_email", "user_active", "user_country_code", "user_game_id", ]
    list_display = ["user_id", "user_name", "user_email", "user_active", "updated_at", ]
    list_filter = ("user_active", )
    search_fields = ("user_name", "user_email", )
    ordering = ["user_name", ]


admin.site.register(Member, MemberAdmin)
