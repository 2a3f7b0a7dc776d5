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

"""Raster primitives for chart drawing, backed by Pillow.

Coordinates are device pixels with y pointing down. Glyph angles are in
degrees, counter-clockwise, rotating about the text's baseline origin. Font
sizes are typographic points rendered at GLYPH_DPI, so a 102 pt Landolt C has
the same pixel size it had in the calibrated print charts.
"""

# Standard Library
import math

# Third Party
from PIL import Image
from PIL import ImageDraw

# local repo modules
from . import fonts


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (200, 0, 0)

GLYPH_DPI = 96.0
PNG_COMPRESS_LEVEL = 6


#============================================
def point_size_to_pixels(point_size: float) -> float:
	return float(point_size) * GLYPH_DPI / 72.0


#============================================
def allocate_canvas(width, height, background=WHITE, mode: str = "RGB") -> Image.Image:
	"""Return a new canvas filled with the background color.

	Fractional sizes are truncated the way the print charts were sized.
	"""
	width = int(width)
	height = int(height)
	if width <= 0 or height <= 0:
		raise ValueError(f"Canvas size must be positive, got {width}x{height}")
	return Image.new(mode, (width, height), background)


#============================================
def draw_filled_circle(canvas: Image.Image, center_x: float, center_y: float,
		diameter: float, color=BLACK) -> None:
	radius = diameter / 2.0
	draw = ImageDraw.Draw(canvas)
	draw.ellipse(
		(center_x - radius, center_y - radius, center_x + radius, center_y + radius),
		fill=color,
	)


#============================================
def copy_region(target: Image.Image, source: Image.Image, x: float, y: float) -> None:
	"""Copy all of source onto target with its top-left corner at (x, y)."""
	target.paste(source, (int(x), int(y)))


#============================================
def pixel_at(canvas: Image.Image, x: int, y: int):
	return canvas.getpixel((int(x), int(y)))


#============================================
def _rotate_point(x: float, y: float, angle: float) -> tuple[float, float]:
	# counter-clockwise on screen, which is clockwise in y-down math
	radians = math.radians(angle)
	cos_a = math.cos(radians)
	sin_a = math.sin(radians)
	return (x * cos_a + y * sin_a, -x * sin_a + y * cos_a)


#============================================
def glyph_outline_box(text: str, font_file: str, point_size: float,
		angle: float = 0.0) -> tuple[int, int, int, int, int, int, int, int]:
	"""Return the rotated outline corners of text as 8 integers.

	Corner order is lower-left, lower-right, upper-right, upper-left, each
	as (x, y) relative to the baseline origin, after rotating by angle.
	"""
	font = fonts.load_font(font_file, point_size_to_pixels(point_size))
	left, top, right, bottom = font.getbbox(text, anchor="ls")
	corners = ((left, bottom), (right, bottom), (right, top), (left, top))
	values = []
	for corner_x, corner_y in corners:
		rotated_x, rotated_y = _rotate_point(corner_x, corner_y, angle)
		values.append(int(round(rotated_x)))
		values.append(int(round(rotated_y)))
	return tuple(values)


#============================================
def draw_glyph(canvas: Image.Image, x: float, y: float, text: str, font_file: str,
		point_size: float, angle: float = 0.0, color=BLACK) -> None:
	"""Draw text with its baseline origin at (x, y), rotated by angle.

	The text is rasterized unrotated into a square coverage mask centred on
	the baseline origin, rotated about that centre, and used as the paste
	mask for a solid color. Right-angle rotations are exact pixel transposes.
	"""
	font = fonts.load_font(font_file, point_size_to_pixels(point_size))
	left, top, right, bottom = font.getbbox(text, anchor="ls")
	reach = max(
		math.hypot(corner_x, corner_y)
		for corner_x in (left, right)
		for corner_y in (top, bottom)
	)
	radius = int(math.ceil(reach)) + 2
	side = 2 * radius
	with Image.new("L", (side, side), 0) as mask:
		ImageDraw.Draw(mask).text((radius, radius), text, font=font, fill=255, anchor="ls")
		with mask.rotate(angle, resample=Image.Resampling.BICUBIC) as rotated:
			canvas.paste(color, (int(x) - radius, int(y) - radius), rotated)


#============================================
def save_png(canvas: Image.Image, path: str, dpi: float | None = None) -> str:
	"""Write canvas as PNG with the fixed compression level."""
	options = {"compress_level": PNG_COMPRESS_LEVEL, "optimize": False}
	if dpi:
		options["dpi"] = (dpi, dpi)
	canvas.save(path, format="PNG", **options)
	return path
