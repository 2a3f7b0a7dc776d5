# Standard Library
import os
import sys


def pytest_addoption(parser):
	parser.addoption(
		"--save",
		action="store_true",
		default=False,
		help="Save rendered charts to the current working directory",
	)


def repo_root():
	root = _find_repo_root(os.path.dirname(os.path.abspath(__file__)))
	if not root:
		raise RuntimeError("repo root could not be resolved from the tests directory")
	return root


#============================================
def tests_root():
	return os.path.join(repo_root(), "tests")


#============================================
def _find_repo_root(start_dir):
	current = os.path.abspath(start_dir)
	while True:
		if _looks_like_repo_root(current):
			return current
		parent = os.path.dirname(current)
		if parent == current:
			return ""
		current = parent


#============================================
def _looks_like_repo_root(path):
	if not path:
		return False
	if not os.path.isdir(path):
		return False
	if not os.path.isfile(os.path.join(path, "pyproject.toml")):
		return False
	if not os.path.isdir(os.path.join(path, "packages", "tactchart", "tactchart")):
		return False
	return True


def add_repo_root_to_sys_path():
	root = repo_root()
	if root not in sys.path:
		sys.path.insert(0, root)
	return root


def add_tactchart_to_sys_path():
	root = add_repo_root_to_sys_path()
	package_dir = os.path.join(root, "packages", "tactchart")
	if package_dir not in sys.path:
		sys.path.insert(0, package_dir)
	return root


def add_tools_to_sys_path():
	root = add_tactchart_to_sys_path()
	tools_dir = os.path.join(root, "tools")
	if tools_dir not in sys.path:
		sys.path.insert(0, tools_dir)
	return root


#============================================
def probe_font_file(family="DejaVu Sans"):
	"""Return a font file bundled with matplotlib, usable on any machine."""
	from matplotlib import font_manager
	prop = font_manager.FontProperties(family=family)
	return font_manager.findfont(prop, fallback_to_default=False)
