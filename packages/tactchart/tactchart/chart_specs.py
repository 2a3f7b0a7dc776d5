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

"""Chart geometry and row tables for the printed acuity charts.

Two chart families are reproduced:

- Legge's "Dot" chart. At the baseline row (0 log) dot centres are 2.28 mm
  apart, per Bruns et al. Rows above expand the spacing by 0.1 log units
  (1.2589x) per row, rows below contract it, down to -0.3 log. Dot size is
  constant across the chart.
- Legge's Landolt C chart. A 102 pt Sloan "C" gives a 2.28 mm gap at the
  baseline; the other rows step the point size by 0.1 log units. Direction
  orders are pseudorandom, reusing published sequences where available.

The size tables were computed by hand and checked against printed output,
so they are kept as literal values. Printers and tactile production drift;
size_fudge_factor rescales every row at once after a calibration print.
"""

# Standard Library
import dataclasses
import types

# local repo modules
from . import raster
from .landolt_glyph import LANDOLT_V1_ANGLES
from .landolt_glyph import LANDOLT_V2_ANGLES


DOT_CHART = "dot"
LANDOLT_CHART = "landolt"
CHART_KINDS = (DOT_CHART, LANDOLT_CHART)


#============================================
@dataclasses.dataclass(frozen=True)
class ChartRowSpec:
	"""One acuity row: label, size parameter and symbol sequence.

	size_param is the dot spacing in mm for dot charts and the font size
	in points for Landolt charts.
	"""
	label: str
	size_param: float
	sequence: str


#============================================
@dataclasses.dataclass(frozen=True)
class ChartConfig:
	name: str
	kind: str
	rows: tuple[ChartRowSpec, ...]
	output_stem: str
	dpi: int
	interline_spacing_in: float
	page_width_in: float = 8.5
	page_height_in: float = 11.0
	top_margin_in: float = 0.2
	left_margin_in: float = 0.2
	# pixels removed from each of the 8 equal column widths
	cell_pitch_trim_px: float = 25.0
	size_fudge_factor: float = 1.0
	dot_diameter_mm: float = 1.0
	glyph_font_file: str | None = None
	glyph_text: str = "C"
	direction_angles: types.MappingProxyType | None = None
	label_font_file: str = "FreeSerif, DejaVu Serif"
	label_font_size: float = 72.0
	# labels start at left margin + label_column cell pitches + label_offset_px
	label_column: float = 0.5
	label_offset_px: float = 40.0
	label_color: tuple[int, int, int] = raster.RED

	def __post_init__(self):
		if self.kind not in CHART_KINDS:
			raise ValueError(f"Unsupported chart kind: {self.kind!r}")
		if self.kind == LANDOLT_CHART:
			if not self.glyph_font_file:
				raise ValueError(f"Landolt chart {self.name} requires glyph_font_file")
			if self.direction_angles is None:
				raise ValueError(f"Landolt chart {self.name} requires direction_angles")

	@property
	def page_width_px(self) -> int:
		return int(self.dpi * self.page_width_in)

	@property
	def page_height_px(self) -> int:
		return int(self.dpi * self.page_height_in)

	@property
	def interline_px(self) -> float:
		return self.dpi * self.interline_spacing_in

	@property
	def cell_pitch_px(self) -> float:
		return self.page_width_px / 8 - self.cell_pitch_trim_px

	@property
	def left_margin_px(self) -> float:
		return self.left_margin_in * self.dpi

	@property
	def top_margin_px(self) -> float:
		return self.top_margin_in * self.dpi

	@property
	def label_x_px(self) -> float:
		return self.left_margin_px + self.label_column * self.cell_pitch_px + self.label_offset_px

	def row_size(self, row: ChartRowSpec) -> float:
		"""Return the row's size parameter after the fudge factor."""
		return row.size_param * self.size_fudge_factor


#============================================
def _relabel_by_spacing(rows):
	relabelled = []
	for row in rows:
		label = f"{row.size_param:.1f}mm"
		relabelled.append(dataclasses.replace(row, label=label))
	return tuple(relabelled)


DOT_ROWS = (
	ChartRowSpec("+0.5", 7.2093, "jfhdhdfj"),
	ChartRowSpec("+0.4", 5.7266, "hdjfjdhf"),
	ChartRowSpec("+0.3", 4.5489, "jdfhdfjh"),
	ChartRowSpec("+0.2", 3.6134, "fhdjdfdf"),
	ChartRowSpec("+0.1", 2.8703, "dhfjfhjd"),
	ChartRowSpec("0", 2.2800, "fjhddjfh"),
	ChartRowSpec("-0.1", 1.8111, "fjdhhjdf"),
	ChartRowSpec("-0.2", 1.4386, "hfjddhfh"),
	ChartRowSpec("-0.3", 1.1428, "hdjdjfdj"),
)

LANDOLT_ROWS = (
	ChartRowSpec("+0.3", 203, "rlulddru"),
	ChartRowSpec("+0.2", 162, "ludrrlud"),
	ChartRowSpec("+0.1", 128, "rduuldrl"),
	ChartRowSpec("0", 102, "ulrdrlud"),
	ChartRowSpec("-0.1", 81, "dludrurl"),
	ChartRowSpec("-0.2", 64, "rudlurld"),
	ChartRowSpec("-0.3", 51, "rldrlduu"),
	ChartRowSpec("-0.4", 41, "lrulddru"),
	ChartRowSpec("-0.5", 32, "rlurduld"),
	ChartRowSpec("-0.6", 25, "rddulurl"),
	ChartRowSpec("-0.7", 20, "ludrrlud"),
)

DOT_BASELINE = ChartConfig(
	name="dot-baseline",
	kind=DOT_CHART,
	rows=DOT_ROWS,
	output_stem="dotchart",
	dpi=600,
	interline_spacing_in=0.85,
	top_margin_in=0.20,
	left_margin_in=0.20,
	dot_diameter_mm=1.0,
	label_font_size=72.0,
	label_offset_px=40.0,
)

# same page, labelled with the dot spacing instead of the log value
DOT_RELABELLED = dataclasses.replace(
	DOT_BASELINE,
	name="dot-relabelled",
	rows=_relabel_by_spacing(DOT_ROWS),
	output_stem="dotchart_mm",
)

LANDOLT_V1 = ChartConfig(
	name="landolt-v1",
	kind=LANDOLT_CHART,
	rows=LANDOLT_ROWS,
	output_stem="landolt",
	dpi=300,
	interline_spacing_in=0.55,
	top_margin_in=0.2,
	left_margin_in=0.2,
	glyph_font_file="Sloan",
	direction_angles=LANDOLT_V1_ANGLES,
	label_font_size=18.0,
	# the large rows fill the first columns, so labels go after the last one
	label_column=8.0,
	label_offset_px=0.0,
)

# up and down are swapped relative to v1; pending confirmation of which
# orientation the printed charts intended
LANDOLT_V2 = dataclasses.replace(
	LANDOLT_V1,
	name="landolt-v2",
	output_stem="landolt_v2",
	direction_angles=LANDOLT_V2_ANGLES,
)

CHART_VARIANTS = {
	config.name: config
	for config in (DOT_BASELINE, DOT_RELABELLED, LANDOLT_V1, LANDOLT_V2)
}


#============================================
def get_chart_config(name: str) -> ChartConfig:
	config = CHART_VARIANTS.get(name)
	if config is None:
		known = ", ".join(sorted(CHART_VARIANTS))
		raise ValueError(f"Unknown chart variant {name!r}; expected one of: {known}")
	return config
