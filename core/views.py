"""Views for previewing rendered charts."""

from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse, HttpResponseBadRequest, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from core.charting.conf import get_highcharts_settings
from core.charting.schema import Engine, coerce_engine
from core.charting.snapshot_codec import encode_chart
from core.charting.variants import ChartVariant
from core.demo import build_demo_chart

logger = logging.getLogger(__name__)


def _requested_variant(request: HttpRequest) -> ChartVariant:
    raw = request.GET.get("variant") or ChartVariant.CHART.value
    return ChartVariant(raw.strip().casefold())


def _requested_engine(request: HttpRequest) -> Engine:
    raw = request.GET.get("engine")
    if raw is None:
        return get_highcharts_settings().engine
    return coerce_engine(raw)


@require_GET
def chart_preview(request: HttpRequest) -> HttpResponse:
    """Render the demo chart inside an HTML page.

    Query params:
        variant: `chart` (default) or `stock`.
        engine: `jquery`, `mootools`, or `none`; defaults to `HIGHCHARTS["ENGINE"]`.
    """

    try:
        variant = _requested_variant(request)
        engine = _requested_engine(request)
    except ValueError as exc:
        logger.info("Rejected chart preview request: %s", exc)
        return HttpResponseBadRequest(str(exc))

    chart = build_demo_chart(variant)
    context = {
        "page_title": f"Highcharts {variant.value} preview",
        "chart": chart,
        "engine": engine.value,
        "render_to": chart.get_render_to(),
    }
    return render(request, "core/chart_preview.html", context)


@require_GET
def chart_options(request: HttpRequest) -> HttpResponse:
    """Return the demo chart as a JSON snapshot."""

    try:
        variant = _requested_variant(request)
    except ValueError as exc:
        return HttpResponseBadRequest(str(exc))
    return JsonResponse(encode_chart(build_demo_chart(variant)))
