"""Output layer for hatcher.

This module turns generated segments into files. It keeps serialization
out of the generator and the clipper, which never perform I/O.

Key classes:
- SvgWriter: Save hatch drawings as SVG
"""

from hatcher.io.writer import SvgWriter, build_drawing, build_svg, format_number

__all__ = [
    "SvgWriter",
    "build_drawing",
    "build_svg",
    "format_number",
]
