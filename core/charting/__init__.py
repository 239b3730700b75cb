"""Highcharts option trees and their JavaScript rendering.

Charts are built from named `ChartOption` containers and rendered into an
inline script by `AbstractChart.render`. This package does not depend on a
configured Django project; `conf` only reads `settings.HIGHCHARTS` when
settings are available.
"""
