"""Chart geometry: value mapping, bar packing, curves, arcs and tooltips.

Submodules are imported directly (``beaned_charts.layout.bars`` etc.) since
they depend on :mod:`beaned_charts.config`, which itself reads the layout
constants.
"""
