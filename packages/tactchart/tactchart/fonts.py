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

"""Font file resolution and cached Pillow font loading."""

# Standard Library
import functools
import os

# Third Party
from matplotlib import font_manager
from PIL import ImageFont

# local repo modules
from .errors import FontLoadError


FONT_FILE_SUFFIXES = (".ttf", ".otf", ".ttc")
# searched relative to the working directory before the system font cache
FONT_SEARCH_DIRS = ("fonts", "ecfonts")
FONT_DIR_ENV = "TACTCHART_FONT_DIR"


#============================================
def font_family_candidates(font_name: str) -> list[str]:
	"""Return prioritized family names parsed from a comma separated font name."""
	raw = str(font_name or "")
	seen = set()
	unique = []
	for token in raw.split(","):
		clean = token.strip().strip("'").strip('"')
		if not clean:
			continue
		key = clean.lower()
		if key in seen:
			continue
		seen.add(key)
		unique.append(clean)
	return unique


#============================================
def _looks_like_path(font_name: str) -> bool:
	if os.sep in font_name or "/" in font_name:
		return True
	return font_name.lower().endswith(FONT_FILE_SUFFIXES)


#============================================
def _search_dirs() -> list[str]:
	dirs = []
	env_dir = os.environ.get(FONT_DIR_ENV)
	if env_dir:
		dirs.append(env_dir)
	dirs.extend(os.path.abspath(name) for name in FONT_SEARCH_DIRS)
	return dirs


#============================================
def _find_in_search_dirs(font_name: str) -> str | None:
	base = os.path.basename(font_name)
	if base.lower().endswith(FONT_FILE_SUFFIXES):
		names = [base]
	else:
		names = [base + suffix for suffix in FONT_FILE_SUFFIXES]
	for directory in _search_dirs():
		for name in names:
			candidate = os.path.join(directory, name)
			if os.path.isfile(candidate):
				return candidate
	return None


#============================================
@functools.lru_cache(maxsize=None)
def resolve_font_file(font_name: str) -> str:
	"""Return a loadable font file for a path or a family name.

	Lookup order: the literal path, the local font directories
	(``$TACTCHART_FONT_DIR``, ``./fonts``, ``./ecfonts``), then the matplotlib
	font cache for family names. Missing fonts raise FontLoadError instead of
	falling back to a default face, since a chart drawn in the wrong face has
	the wrong optotype geometry.
	"""
	text = str(font_name or "").strip()
	if not text:
		raise FontLoadError("No font file or family name given")
	if os.path.isfile(text):
		return os.path.abspath(text)
	found = _find_in_search_dirs(text)
	if found:
		return found
	if _looks_like_path(text):
		raise FontLoadError(f"Font file not found: {text}")
	families = font_family_candidates(text)
	prop = font_manager.FontProperties(family=families)
	try:
		return font_manager.findfont(prop, fallback_to_default=False)
	except ValueError as exc:
		raise FontLoadError(f"No installed font matches {text!r}") from exc


#============================================
@functools.lru_cache(maxsize=128)
def load_font(font_name: str, pixel_size: float) -> ImageFont.FreeTypeFont:
	"""Return a Pillow FreeType face at the given pixel size."""
	path = resolve_font_file(font_name)
	try:
		return ImageFont.truetype(path, pixel_size)
	except OSError as exc:
		raise FontLoadError(f"Could not load font {path}: {exc}") from exc
