"""Presentation layer for the statistics screens.

Subpackages:
- ``gui.charting``: sparse time-series encoding engine, chart registry and backend
- ``gui.design``: rating color scale and ramp validation
- ``gui.services``: text sparklines for terminal output

Imports here stay lazy; importing ``gui`` does not pull in matplotlib.
"""
