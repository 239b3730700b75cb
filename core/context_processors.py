"""Template context processors for highchartsBundle."""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest


def highcharts(request: HttpRequest) -> dict[str, str]:
    """Expose the Highcharts script URL to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `highcharts_script_url`.
    """

    return {"highcharts_script_url": settings.HIGHCHARTS_SCRIPT_URL}
