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

# Standard Library
import os

# local repo modules
from . import raster
from .chart_layout import ChartLayoutEngine
from .chart_specs import ChartConfig


#============================================
def chart_output_paths(config: ChartConfig, output_dir: str) -> tuple[str, str]:
	"""Return the (plain, labelled) PNG paths for one chart variant."""
	plain = os.path.join(output_dir, f"{config.output_stem}.png")
	labelled = os.path.join(output_dir, f"{config.output_stem}_labelled.png")
	return (plain, labelled)


#============================================
def render_chart_pair(config: ChartConfig, strict_ink: bool = False):
	"""Render the plain and labelled pages, each on its own blank canvas."""
	engine = ChartLayoutEngine(config, strict_ink=strict_ink)
	plain = engine.layout(with_labels=False)
	labelled = engine.layout(with_labels=True)
	return (plain, labelled)


#============================================
def save_chart_pair(config: ChartConfig, plain, labelled, output_dir: str):
	"""Write an already rendered plain and labelled pair, then free the pages."""
	plain_path, labelled_path = chart_output_paths(config, output_dir)
	os.makedirs(output_dir, exist_ok=True)
	try:
		raster.save_png(plain.image, plain_path, dpi=config.dpi)
		raster.save_png(labelled.image, labelled_path, dpi=config.dpi)
	finally:
		plain.image.close()
		labelled.image.close()
	return (plain_path, labelled_path)


#============================================
def write_chart(config: ChartConfig, output_dir: str, strict_ink: bool = False):
	"""Render one chart variant and write its two PNG files.

	Both pages are rendered before anything is written, so a bad symbol or
	a missing font leaves no partial output behind.
	"""
	plain, labelled = render_chart_pair(config, strict_ink=strict_ink)
	plain_path, labelled_path = save_chart_pair(config, plain, labelled, output_dir)
	return (plain, labelled, plain_path, labelled_path)
