from django.contrib import admin

from tours import models


class TournamentInline(admin.TabularInline):
    model = models.Tournament
    can_delete = False
    extra = 0
    show_change_link = True
    fields = ["tournament_id", "name", "course_name", "status", "start_date", "end_date", ]


@admin.register(models.Tour)
class TourAdmin(admin.ModelAdmin):
    fields = ["tour_id", "name", "start_date", "end_date", "team_tour", "active", ]
    inlines = [TournamentInline]
    list_display = ["tour_id", "name", "start_date", "end_date", "active", "updated_at", ]
    list_filter = ("active", )
    ordering = ["-start_date", ]


@admin.register(models.TourStanding)
class TourStandingAdmin(admin.ModelAdmin):
    list_display = ["tour", "gross_or_net", "position", "user_name", "points", "events", ]
    list_filter = ("tour", "gross_or_net", )
    search_fields = ("user_name", )
    ordering = ["tour", "gross_or_net", "position", ]


@admin.register(models.TourMember)
class TourMemberAdmin(admin.ModelAdmin):
    list_display = ["tour", "user_id", "user_name", "hcp_index", "custom_hcp", ]
    list_filter = ("tour", )
    search_fields = ("user_name", )


@admin.register(models.Tournament)
class TournamentAdmin(admin.ModelAdmin):
    list_display = ["tournament_id", "name", "tour", "course_name", "status", "end_date", ]
    list_filter = ("tour", "status", )
    date_hierarchy = "start_date"
    search_fields = ("name", "course_name", )
