#--------------------------------------------------------------------------
#     This file is part of tactchart - a tactile acuity chart generator
#     Copyright (C) 2018 Anthony Tibbs <anthony@tibbs.ca>
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 3 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Dot chart symbols: the top four dots of a braille cell.

	Layout    d       f        h       j
	o  o      + +     + +      + o     o +
	o  o      o +     + o      + +     + +

Dots are drawn black on white, all with the same diameter. Dot spacing is
measured centre to centre.
"""

# Third Party
from PIL import Image

# local repo modules
from . import raster
from .errors import UnknownSymbolError


MM_TO_INCH = 0.0393701
# extra cell margin so rounding never clips the outer dots
CELL_MARGIN_MM = 1.0

# presence flags for (top-left, bottom-left, top-right, bottom-right)
DOT_PATTERNS = {
	"d": (1, 0, 1, 1),
	"f": (1, 1, 1, 0),
	"h": (1, 1, 0, 1),
	"j": (0, 1, 1, 1),
}


#============================================
def mm_to_px(length_mm: float, dpi: float) -> float:
	return length_mm * MM_TO_INCH * dpi


#============================================
def dot_pattern(code: str, row_label=None, position=None) -> tuple[int, int, int, int]:
	"""Return the presence flags for one symbol code."""
	pattern = DOT_PATTERNS.get(code)
	if pattern is None:
		raise UnknownSymbolError(code, row_label=row_label, position=position)
	return pattern


#============================================
def dot_cell_size_px(spacing_mm: float, dot_diameter_mm: float, dpi: float) -> int:
	"""Return the side of the square cell holding one symbol."""
	cell_mm = 2 * dot_diameter_mm + spacing_mm + CELL_MARGIN_MM
	return int(mm_to_px(cell_mm, dpi))


#============================================
def dot_centers(code: str, spacing_mm: float, dot_diameter_mm: float,
		dpi: float) -> list[tuple[float, float]]:
	"""Return the pixel centres of the dots present in one symbol."""
	pattern = dot_pattern(code)
	half = mm_to_px(dot_diameter_mm, dpi) / 2.0
	spacing = mm_to_px(spacing_mm, dpi)
	positions = (
		(half, half),
		(half, half + spacing),
		(half + spacing, half),
		(half + spacing, half + spacing),
	)
	return [point for point, present in zip(positions, pattern) if present]


#============================================
def render_dot_glyph(code: str, spacing_mm: float, dot_diameter_mm: float = 1.0,
		dpi: float = 600) -> Image.Image:
	"""Return a new square canvas with the symbol's dots drawn on it.

	The caller owns the canvas and should close it after compositing.
	"""
	centers = dot_centers(code, spacing_mm, dot_diameter_mm, dpi)
	cell_size = dot_cell_size_px(spacing_mm, dot_diameter_mm, dpi)
	diameter = mm_to_px(dot_diameter_mm, dpi)
	canvas = raster.allocate_canvas(cell_size, cell_size)
	for center_x, center_y in centers:
		raster.draw_filled_circle(canvas, center_x, center_y, diameter)
	return canvas