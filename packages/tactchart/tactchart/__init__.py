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

"""Tactile acuity chart generator: Legge dot charts and Landolt C charts."""

__version__ = "0.2.0"

# local repo modules
from .chart_layout import ChartLayout
from .chart_layout import ChartLayoutEngine
from .chart_layout import layout_chart
from .chart_out import write_chart
from .chart_specs import CHART_VARIANTS
from .chart_specs import ChartConfig
from .chart_specs import ChartRowSpec
from .chart_specs import get_chart_config
from .errors import ChartError
from .errors import EmptyGlyphError
from .errors import FontLoadError
from .errors import UnknownSymbolError
from .text_box import BoundingBox
from .text_box import measure_text_box
