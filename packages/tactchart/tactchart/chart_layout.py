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

"""Row-by-row chart layout.

Rows are placed top to bottom in declaration order. Each row puts its
symbols left to right at a fixed cell pitch, and the next row starts below
the tallest symbol plus the interline spacing. Labels are a second pass over
the same rows that reuses the recorded row heights, so they never move a
symbol.
"""

# Standard Library
import dataclasses

# Third Party
from PIL import Image

# local repo modules
from . import dot_glyph
from . import landolt_glyph
from . import raster
from .chart_specs import ChartConfig
from .chart_specs import DOT_CHART
from .errors import EmptyGlyphError


#============================================
@dataclasses.dataclass
class LayoutCursor:
	x: float
	y: float
	row_height: float = 0


#============================================
@dataclasses.dataclass(frozen=True)
class RowPlacement:
	label: str
	y: float
	height: float
	size: float
	symbol_heights: tuple[int, ...]


#============================================
@dataclasses.dataclass(frozen=True)
class LabelPlacement:
	text: str
	anchor_x: float
	anchor_y: float
	placement: landolt_glyph.GlyphPlacement

	@property
	def region(self) -> tuple[int, int, int, int]:
		"""Return the (x1, y1, x2, y2) pixel span the label's ink covers."""
		box = self.placement.box
		x1 = int(self.anchor_x)
		y1 = int(self.anchor_y)
		return (x1, y1, x1 + box.width, y1 + box.height)


#============================================
@dataclasses.dataclass(frozen=True)
class ChartLayout:
	config: ChartConfig
	image: Image.Image
	rows: tuple[RowPlacement, ...]
	labels: tuple[LabelPlacement, ...]
	final_y: float
	labelled: bool = False

	@property
	def overflows_page(self) -> bool:
		"""Return True when the last row's ink runs past the page bottom."""
		if not self.rows:
			return False
		last = self.rows[-1]
		return last.y + last.height > self.config.page_height_px


#============================================
class ChartLayoutEngine:
	"""Lay out one chart variant onto a fresh page canvas per call."""

	def __init__(self, config: ChartConfig, strict_ink: bool = False):
		self.config = config
		self.strict_ink = strict_ink

	#============================================
	def validate(self) -> None:
		"""Raise UnknownSymbolError for the first code the chart cannot draw."""
		for row in self.config.rows:
			for position, code in enumerate(row.sequence):
				if self.config.kind == DOT_CHART:
					dot_glyph.dot_pattern(code, row_label=row.label, position=position)
				else:
					landolt_glyph.direction_angle(
						code, self.config.direction_angles,
						row_label=row.label, position=position,
					)

	#============================================
	def layout(self, with_labels: bool = False) -> ChartLayout:
		"""Render every row, and the labels when asked, onto a blank page."""
		self.validate()
		config = self.config
		image = raster.allocate_canvas(config.page_width_px, config.page_height_px)
		rows, final_y = self._draw_rows(image)
		labels = ()
		if with_labels:
			labels = self._draw_labels(image, rows)
		return ChartLayout(
			config=config,
			image=image,
			rows=rows,
			labels=labels,
			final_y=final_y,
			labelled=with_labels,
		)

	#============================================
	def _draw_rows(self, image) -> tuple[tuple[RowPlacement, ...], float]:
		config = self.config
		cursor = LayoutCursor(x=config.left_margin_px, y=config.top_margin_px)
		placements = []
		for row in config.rows:
			cursor.x = config.left_margin_px
			cursor.row_height = 0
			size = config.row_size(row)
			heights = []
			for position, code in enumerate(row.sequence):
				if config.kind == DOT_CHART:
					height = self._draw_dot_symbol(image, code, size, cursor)
				else:
					height = self._draw_landolt_symbol(image, code, size, cursor, row.label, position)
				heights.append(height)
				cursor.row_height = max(cursor.row_height, height)
				cursor.x += config.cell_pitch_px
			placements.append(RowPlacement(
				label=row.label,
				y=cursor.y,
				height=cursor.row_height,
				size=size,
				symbol_heights=tuple(heights),
			))
			cursor.y += cursor.row_height + config.interline_px
		return tuple(placements), cursor.y

	#============================================
	def _draw_dot_symbol(self, image, code: str, spacing_mm: float, cursor: LayoutCursor) -> int:
		config = self.config
		with dot_glyph.render_dot_glyph(code, spacing_mm, config.dot_diameter_mm, config.dpi) as cell:
			raster.copy_region(image, cell, cursor.x, cursor.y)
			return cell.height

	#============================================
	def _draw_landolt_symbol(self, image, code: str, point_size: float,
			cursor: LayoutCursor, row_label: str, position: int) -> int:
		config = self.config
		angle = landolt_glyph.direction_angle(code, config.direction_angles, row_label, position)
		placement = landolt_glyph.place_rotated_glyph(
			config.glyph_text, config.glyph_font_file, point_size, angle, cursor.x, cursor.y,
		)
		if not placement.has_ink:
			if self.strict_ink:
				raise EmptyGlyphError(config.glyph_text, row_label=row_label, position=position)
			return 0
		landolt_glyph.draw_placement(image, placement)
		return placement.height

	#============================================
	def _draw_labels(self, image, rows) -> tuple[LabelPlacement, ...]:
		config = self.config
		labels = []
		current_y = config.top_margin_px
		for row in rows:
			anchor_x = config.label_x_px
			placement = landolt_glyph.place_rotated_glyph(
				row.label, config.label_font_file, config.label_font_size, 0, anchor_x, current_y,
			)
			if placement.has_ink:
				landolt_glyph.draw_placement(image, placement, color=config.label_color)
				labels.append(LabelPlacement(
					text=row.label,
					anchor_x=anchor_x,
					anchor_y=current_y,
					placement=placement,
				))
			elif self.strict_ink:
				raise EmptyGlyphError(row.label, row_label=row.label)
			current_y += row.height + config.interline_px
		return tuple(labels)


#============================================
def layout_chart(config: ChartConfig, with_labels: bool = False, strict_ink: bool = False) -> ChartLayout:
	return ChartLayoutEngine(config, strict_ink=strict_ink).layout(with_labels=with_labels)
