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

"""Rotated glyph placement for Landolt C rows and row labels."""

# Standard Library
import dataclasses
import types

# local repo modules
from . import raster
from .errors import UnknownSymbolError
from .text_box import BoundingBox
from .text_box import measure_text_box


# the unrotated Sloan "C" opens to the right
LANDOLT_GLYPH = "C"

# two printed chart sets disagree on which way u and d turn; keep both
LANDOLT_V1_ANGLES = types.MappingProxyType({"u": 270, "l": 180, "r": 0, "d": 90})
LANDOLT_V2_ANGLES = types.MappingProxyType({"u": 90, "l": 180, "r": 0, "d": 270})


#============================================
@dataclasses.dataclass(frozen=True)
class GlyphPlacement:
	"""Where to draw one measured glyph so its ink starts at a cell origin."""
	text: str
	font_file: str
	point_size: float
	angle: float
	draw_x: float
	draw_y: float
	box: BoundingBox

	@property
	def height(self) -> int:
		return self.box.height

	@property
	def has_ink(self) -> bool:
		return self.box.has_ink


#============================================
def direction_angle(code: str, angles, row_label=None, position=None) -> float:
	"""Return the rotation for one direction code from a chart's table."""
	angle = angles.get(code)
	if angle is None:
		raise UnknownSymbolError(code, row_label=row_label, position=position)
	return angle


#============================================
def place_rotated_glyph(text: str, font_file: str, point_size: float, angle: float,
		origin_x: float, origin_y: float) -> GlyphPlacement:
	"""Measure text and return its draw position for a nominal cell origin."""
	box = measure_text_box(text, font_file, point_size, angle)
	return GlyphPlacement(
		text=text,
		font_file=font_file,
		point_size=point_size,
		angle=angle,
		draw_x=origin_x + box.left,
		draw_y=origin_y + box.top,
		box=box,
	)


#============================================
def draw_placement(canvas, placement: GlyphPlacement, color=raster.BLACK) -> None:
	raster.draw_glyph(
		canvas,
		placement.draw_x,
		placement.draw_y,
		placement.text,
		placement.font_file,
		placement.point_size,
		placement.angle,
		color=color,
	)
