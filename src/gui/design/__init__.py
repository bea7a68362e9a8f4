"""Design package: color scale and color utilities for the heat grid."""

from .color_scale import ColorDescriptor, cell_style, legend_styles  # noqa: F401
from .heatmap_ramp_validation import validate_color_scale, validate_heatmap_ramp  # noqa: F401
