from django.urls import path
from . import views

app_name = "sgt"

urlpatterns = [
    path("", views.dashboard_query, name="dashboard_query"),
    path("sync/", views.sync_sgt, name="sync"),
    path("sync-status/", views.sync_status, name="sync_status"),
]
