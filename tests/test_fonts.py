"""Tests for font resolution and loading."""

# Standard Library
import os
import shutil

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_tactchart_to_sys_path()

# local repo modules
from tactchart import fonts
from tactchart.errors import ChartError
from tactchart.errors import FontLoadError
from tactchart.errors import UnknownSymbolError


#============================================
@pytest.fixture(autouse=True)
def clear_font_caches():
	fonts.resolve_font_file.cache_clear()
	fonts.load_font.cache_clear()
	yield
	fonts.resolve_font_file.cache_clear()
	fonts.load_font.cache_clear()


#============================================
def test_font_family_candidates_strips_and_dedupes():
	result = fonts.font_family_candidates(" 'FreeSerif', \"DejaVu Serif\", freeserif,, ")
	assert result == ["FreeSerif", "DejaVu Serif"]


#============================================
def test_font_family_candidates_empty():
	assert fonts.font_family_candidates("") == []


#============================================
def test_resolve_existing_path():
	path = conftest.probe_font_file()
	assert fonts.resolve_font_file(path) == os.path.abspath(path)


#============================================
def test_error_hierarchy():
	assert issubclass(UnknownSymbolError, ChartError)
	assert issubclass(UnknownSymbolError, ValueError)
	assert issubclass(FontLoadError, ChartError)
	assert issubclass(FontLoadError, OSError)
	assert str(FontLoadError("Font file not found: x.ttf")) == "Font file not found: x.ttf"


#============================================
def test_missing_font_is_an_os_error(tmp_path):
	with pytest.raises(OSError):
		fonts.load_font(str(tmp_path / "Absent.ttf"), 20)


#============================================
def test_resolve_missing_path_raises(tmp_path):
	with pytest.raises(FontLoadError):
		fonts.resolve_font_file(str(tmp_path / "Absent.ttf"))


#============================================
def test_resolve_empty_name_raises():
	with pytest.raises(FontLoadError):
		fonts.resolve_font_file("")


#============================================
def test_resolve_unknown_family_raises():
	with pytest.raises(FontLoadError):
		fonts.resolve_font_file("No Such Family Xyzzy")


#============================================
def test_resolve_family_through_matplotlib():
	path = fonts.resolve_font_file("DejaVu Sans")
	assert os.path.isfile(path)


#============================================
def test_resolve_from_font_dir_env(tmp_path, monkeypatch):
	shutil.copy(conftest.probe_font_file(), tmp_path / "Sloan.ttf")
	monkeypatch.setenv(fonts.FONT_DIR_ENV, str(tmp_path))
	assert fonts.resolve_font_file("Sloan") == str(tmp_path / "Sloan.ttf")


#============================================
def test_load_font_rejects_non_font_file(tmp_path):
	bogus = tmp_path / "bogus.ttf"
	bogus.write_text("not a font", encoding="utf-8")
	with pytest.raises(FontLoadError):
		fonts.load_font(str(bogus), 20.0)


#============================================
def test_load_font_returns_sized_face():
	face = fonts.load_font(conftest.probe_font_file(), 40.0)
	assert face.size == pytest.approx(40.0)
