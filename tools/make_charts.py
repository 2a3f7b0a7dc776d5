#!/usr/bin/env python3
"""Render the tactile acuity chart PNGs (plain and labelled) for each variant."""

# Standard Library
import argparse
import os
import sys

# Ensure packages/tactchart is importable when running from a checkout.
_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_PACKAGE_DIR = os.path.join(_REPO_ROOT, "packages", "tactchart")
if _PACKAGE_DIR not in sys.path:
	sys.path.insert(0, _PACKAGE_DIR)

from tactchart.chart_out import render_chart_pair
from tactchart.chart_out import save_chart_pair
from tactchart.chart_specs import CHART_VARIANTS
from tactchart.chart_specs import get_chart_config
from tactchart.errors import ChartError

DEFAULT_CHARTS = ("dot-baseline", "landolt-v1")


#============================================
def parse_args(argv=None) -> argparse.Namespace:
	"""Parse command-line arguments for chart generation."""
	parser = argparse.ArgumentParser(
		description="Render Legge/Bruns dot and Landolt C tactile acuity charts to PNG.",
	)
	parser.add_argument(
		"-c", "--chart",
		dest="charts",
		action="append",
		choices=sorted(CHART_VARIANTS),
		default=None,
		help="Chart variant to render (repeatable; default: dot-baseline and landolt-v1).",
	)
	parser.add_argument(
		"-a", "--all",
		dest="all_charts",
		action="store_true",
		help="Render every chart variant.",
	)
	parser.add_argument(
		"-o", "--output-dir",
		dest="output_dir",
		type=str,
		default=".",
		help="Directory for the PNG files.",
	)
	parser.add_argument(
		"-s", "--strict-ink",
		dest="strict_ink",
		action="store_true",
		help="Fail when a symbol or label renders without visible ink.",
	)
	parser.add_argument(
		"-q", "--quiet",
		dest="quiet",
		action="store_true",
		help="Do not print the written file names.",
	)
	parser.set_defaults(strict_ink=False)
	return parser.parse_args(argv)


#============================================
def selected_chart_names(args: argparse.Namespace) -> list[str]:
	if args.all_charts:
		return list(CHART_VARIANTS)
	if args.charts:
		return list(args.charts)
	return list(DEFAULT_CHARTS)


#============================================
def main(argv=None):
	"""Write the PNG pair for every selected chart variant.

	Every variant is rendered before the first file is written, so a failing
	chart aborts the run with nothing on disk.
	"""
	args = parse_args(argv)
	rendered = []
	for name in selected_chart_names(args):
		config = get_chart_config(name)
		try:
			plain, labelled = render_chart_pair(config, strict_ink=args.strict_ink)
		except ChartError as exc:
			for _config, done_plain, done_labelled in rendered:
				done_plain.image.close()
				done_labelled.image.close()
			print(f"{name}: {exc}", file=sys.stderr)
			raise SystemExit(2) from exc
		rendered.append((config, plain, labelled))
	for config, plain, labelled in rendered:
		width, height = plain.image.size
		plain_path, labelled_path = save_chart_pair(config, plain, labelled, args.output_dir)
		if args.quiet:
			continue
		print(f"Wrote {plain_path} ({width}x{height}, {len(plain.rows)} rows)")
		print(f"Wrote {labelled_path}")
		if plain.overflows_page:
			print(f"  warning: {config.name} runs past the bottom of the page")


if __name__ == "__main__":
	main()
