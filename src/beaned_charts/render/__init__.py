"""SVG rendering of laid-out charts using drawsvg.

The public entry points live in :mod:`beaned_charts.render.chart`.
"""
