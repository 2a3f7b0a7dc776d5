"""Unit tests for the dot chart symbol renderer."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_tactchart_to_sys_path()

# local repo modules
from tactchart import dot_glyph
from tactchart import raster
from tactchart.errors import UnknownSymbolError


#============================================
def _all_positions(spacing_mm, dot_diameter_mm, dpi):
	half = dot_glyph.mm_to_px(dot_diameter_mm, dpi) / 2.0
	spacing = dot_glyph.mm_to_px(spacing_mm, dpi)
	return (
		(half, half),
		(half, half + spacing),
		(half + spacing, half),
		(half + spacing, half + spacing),
	)


#============================================
def test_dot_patterns_cover_four_symbols():
	assert set(dot_glyph.DOT_PATTERNS) == {"d", "f", "h", "j"}
	for pattern in dot_glyph.DOT_PATTERNS.values():
		# every symbol drops exactly one of the four dots
		assert sum(pattern) == 3


#============================================
def test_dot_pattern_values():
	assert dot_glyph.dot_pattern("d") == (1, 0, 1, 1)
	assert dot_glyph.dot_pattern("f") == (1, 1, 1, 0)
	assert dot_glyph.dot_pattern("h") == (1, 1, 0, 1)
	assert dot_glyph.dot_pattern("j") == (0, 1, 1, 1)


#============================================
def test_unknown_dot_pattern_raises():
	with pytest.raises(UnknownSymbolError) as excinfo:
		dot_glyph.dot_pattern("x", row_label="+0.1", position=3)
	assert excinfo.value.symbol == "x"
	assert excinfo.value.row_label == "+0.1"
	assert excinfo.value.position == 3


#============================================
def test_render_unknown_symbol_raises():
	with pytest.raises(UnknownSymbolError):
		dot_glyph.render_dot_glyph("q", 2.28)


#============================================
def test_cell_size_baseline_600dpi():
	# (2 * 1mm + 2.28mm + 1mm) * 0.0393701 * 600 = 124.72 px
	assert dot_glyph.dot_cell_size_px(2.28, 1.0, 600) == 124


#============================================
def test_cell_size_is_deterministic_and_monotonic():
	sizes = [dot_glyph.dot_cell_size_px(spacing, 1.0, 600) for spacing in (1.0, 1.1428, 2.28, 7.2093)]
	assert sizes == sorted(sizes)
	assert len(set(sizes)) == len(sizes)
	assert dot_glyph.dot_cell_size_px(2.28, 1.0, 600) == dot_glyph.dot_cell_size_px(2.28, 1.0, 600)


#============================================
@pytest.mark.parametrize("code", ["d", "f", "h", "j"])
def test_dot_centers_match_pattern(code):
	centers = dot_glyph.dot_centers(code, 2.28, 1.0, 600)
	pattern = dot_glyph.dot_pattern(code)
	assert len(centers) == sum(pattern)
	positions = _all_positions(2.28, 1.0, 600)
	expected = [point for point, present in zip(positions, pattern) if present]
	assert centers == pytest.approx(expected)


#============================================
@pytest.mark.parametrize("code", ["d", "f", "h", "j"])
def test_rendered_cell_has_dots_only_where_present(code):
	spacing_mm = 2.28
	pattern = dot_glyph.dot_pattern(code)
	with dot_glyph.render_dot_glyph(code, spacing_mm, 1.0, 600) as cell:
		side = dot_glyph.dot_cell_size_px(spacing_mm, 1.0, 600)
		assert cell.size == (side, side)
		for (center_x, center_y), present in zip(_all_positions(spacing_mm, 1.0, 600), pattern):
			pixel = raster.pixel_at(cell, center_x, center_y)
			if present:
				assert pixel == raster.BLACK
			else:
				assert pixel == raster.WHITE


#============================================
def test_rendered_cell_corner_margin_is_blank():
	with dot_glyph.render_dot_glyph("d", 2.28, 1.0, 600) as cell:
		side = cell.width
		# the extra 1 mm margin sits past the right and bottom dots
		assert raster.pixel_at(cell, side - 1, side - 1) == raster.WHITE
