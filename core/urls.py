"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.chart_preview, name="chart_preview"),
    path("api/chart/", views.chart_options, name="chart_options"),
]
