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

"""Tight ink bounding boxes for rotated text.

Font outline boxes are loose and, once rotated, do not say where ink lands.
The measurer draws the text into a scratch canvas four times the outline
size, at an anchor far enough from the edges that the ink cannot be clipped,
and scans every pixel for coverage. That scan is O(width * height * 16) per
call, which is acceptable for offline chart generation; results are memoised.
"""

# Standard Library
import dataclasses
import functools

# Third Party
import numpy

# local repo modules
from . import raster


# what a measurement found
BOX_INK = "ink"
BOX_NO_INK = "no-ink"
BOX_NO_OUTLINE = "no-outline"


#============================================
@dataclasses.dataclass(frozen=True)
class BoundingBox:
	"""Ink extents of one rendered text.

	left and top are drawing-origin offsets: drawing the text at
	(anchor_x + left, anchor_y + top) puts the top-left ink pixel on the
	anchor. A box without ink keeps the scan sentinels, so width and height
	are zero or negative; check has_ink before using it. kind tells a drawn
	glyph with no ink (BOX_NO_INK) from text with no outline at all
	(BOX_NO_OUTLINE).
	"""
	left: float
	top: float
	width: int
	height: int
	kind: str = BOX_INK

	@property
	def has_ink(self) -> bool:
		return self.kind == BOX_INK and self.width > 0 and self.height > 0


EMPTY_BOX = BoundingBox(0, 0, 0, 0, kind=BOX_NO_OUTLINE)


#============================================
def outline_extents(corners) -> tuple[int, int, int, int]:
	"""Return (min_x, min_y, max_x, max_y) over 8 corner coordinates."""
	xs = corners[0::2]
	ys = corners[1::2]
	return (min(xs), min(ys), max(xs), max(ys))


#============================================
def scan_ink_extents(pixels: numpy.ndarray) -> tuple[int, int, int, int]:
	"""Return (min_x, min_y, max_x, max_y) of non-zero pixels.

	With no ink the sentinels come back unchanged: min_x and min_y are the
	buffer width and height, max_x and max_y are 0.
	"""
	height, width = pixels.shape[:2]
	scan_min_x = width
	scan_min_y = height
	scan_max_x = 0
	scan_max_y = 0
	ys, xs = numpy.nonzero(pixels)
	if xs.size:
		scan_min_x = min(scan_min_x, int(xs.min()))
		scan_max_x = max(scan_max_x, int(xs.max()))
		scan_min_y = min(scan_min_y, int(ys.min()))
		scan_max_y = max(scan_max_y, int(ys.max()))
	return (scan_min_x, scan_min_y, scan_max_x, scan_max_y)


#============================================
@functools.lru_cache(maxsize=1024)
def measure_text_box(text: str, font_file: str, point_size: float, angle: float = 0.0) -> BoundingBox:
	"""Return the tight ink box of text drawn at point_size and angle."""
	corners = raster.glyph_outline_box(text, font_file, point_size, angle)
	min_x, min_y, max_x, max_y = outline_extents(corners)
	width = max_x - min_x
	height = max_y - min_y
	if width <= 0 or height <= 0:
		return EMPTY_BOX
	# anchor far enough in that rotated ink stays inside the 4x canvas
	left = abs(min_x) + width
	top = abs(min_y) + height
	with raster.allocate_canvas(width << 2, height << 2, background=0, mode="L") as scratch:
		raster.draw_glyph(scratch, left, top, text, font_file, point_size, angle, color=255)
		pixels = numpy.asarray(scratch)
		scan_min_x, scan_min_y, scan_max_x, scan_max_y = scan_ink_extents(pixels)
	ink_width = scan_max_x - scan_min_x + 1
	ink_height = scan_max_y - scan_min_y + 1
	kind = BOX_INK
	if ink_width <= 0 or ink_height <= 0:
		kind = BOX_NO_INK
	return BoundingBox(
		left=left - scan_min_x,
		top=top - scan_min_y,
		width=ink_width,
		height=ink_height,
		kind=kind,
	)
