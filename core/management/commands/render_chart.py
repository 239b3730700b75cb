"""Render a chart snapshot file as inline JavaScript.

The input is a JSON snapshot as produced by
`core.charting.snapshot_codec.encode_chart` (or the `api/chart/` endpoint).
Pass `-` to read the snapshot from stdin.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from core.charting.schema import Engine
from core.charting.snapshot_codec import decode_chart

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Render a chart snapshot to stdout."""

    help = "Render a chart snapshot (JSON) as a Highcharts script fragment."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("snapshot", help="Path to a snapshot JSON file, or '-' for stdin.")
        parser.add_argument(
            "--engine",
            choices=[engine.value for engine in Engine],
            default=None,
            help="DOM-ready wrapper; defaults to HIGHCHARTS['ENGINE'].",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        source: str = options["snapshot"]
        engine: str | None = options["engine"]

        raw = self._read_snapshot(source)
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CommandError(f"Snapshot is not valid JSON: {exc}") from exc

        try:
            chart = decode_chart(payload)
        except ValueError as exc:
            logger.warning("Invalid chart snapshot %s: %s", source, exc)
            raise CommandError(f"Invalid chart snapshot: {exc}") from exc

        self.stdout.write(chart.render(engine))
        return None

    def _read_snapshot(self, source: str) -> str:
        if source == "-":
            return sys.stdin.read()
        path = Path(source)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CommandError(f"Cannot read snapshot file {source!r}: {exc}") from exc
