from django.contrib import admin

from scores import models


@admin.register(models.Scorecard)
class ScorecardAdmin(admin.ModelAdmin):
    fields = ["tournament", "player_id", "player_name", "hcp_index", "round", "course_name", "teetype",
              "rating", "slope", "total_gross", "total_net", "to_par_gross", "to_par_net",
              "in_gross", "out_gross", "in_net", "out_net", "hole_data", ]
    list_display = ["tournament", "player_name", "round", "total_gross", "total_net", "to_par_gross", ]
    ordering = ["tournament", "player_name", "round", ]
    search_fields = ("player_name", "tournament__name", )
    list_filter = ("tournament__tour", )

    save_on_top = True
