"""Template tags for embedding rendered charts.

Usage:
    {% load highcharts %}
    <script>{% highchart chart %}</script>
    <script>{% highchart chart engine="none" %}</script>
"""

from __future__ import annotations

from django import template
from django.utils.safestring import SafeString, mark_safe

from core.charting.render import AbstractChart

register = template.Library()


@register.simple_tag
def highchart(chart: AbstractChart, engine: str | None = None) -> SafeString:
    """Render `chart` as inline JavaScript.

    The output is marked safe. JSON strings never contain a literal `</`, so
    option data cannot close the surrounding `<script>` element. Raw
    expressions are trusted caller-supplied source and emitted as given.
    """

    return mark_safe(chart.render(engine))
