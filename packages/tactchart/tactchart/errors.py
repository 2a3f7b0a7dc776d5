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

"""Exceptions raised while building a chart."""


#============================================
class ChartError(RuntimeError):
	pass


#============================================
class UnknownSymbolError(ChartError, ValueError):
	"""A row sequence holds a code the chart has no glyph for."""

	def __init__(self, symbol, row_label=None, position=None):
		self.symbol = symbol
		self.row_label = row_label
		self.position = position
		if row_label is None:
			message = f"Unknown chart symbol {symbol!r}"
		else:
			message = f"Error in sequence for {row_label}: unrecognized symbol {symbol!r} (pos {position})"
		super().__init__(message)


#============================================
class FontLoadError(ChartError, OSError):
	"""A font family or file could not be resolved or opened."""


#============================================
class EmptyGlyphError(ChartError):
	"""A glyph was drawn but no ink landed on the scratch canvas."""

	def __init__(self, text, row_label=None, position=None):
		self.text = text
		self.row_label = row_label
		self.position = position
		super().__init__(f"Glyph {text!r} in row {row_label} (pos {position}) has no visible ink")
