from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from modesync import constants
from modesync.adapters.artifact_paths import get_default_paths
from modesync.validators.engine import validate
from modesync.validators.errors import ConfigurationError
from modesync.validators.reporter import Console, print_modes, report


def _build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		description="Validate that UI buttons, backend modes and Kafka wiring agree with the scaling mode mapping."
	)
	parser.add_argument(
		"--config",
		default=os.getenv(constants.MAPPING_PATH_ENV, constants.DEFAULT_MAPPING_PATH),
		help="Path to the scaling mode mapping, relative to --root unless absolute.",
	)
	parser.add_argument(
		"--root",
		default=None,
		help="Repository root the mapping and artifact paths resolve against (default: current directory).",
	)
	parser.add_argument(
		"--fix",
		action="store_true",
		help="Accepted for compatibility; artifacts are never modified.",
	)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = _build_parser().parse_args(argv)
	repo_root = Path(args.root).resolve().as_posix() if args.root else os.getcwd()
	console = Console(sys.stdout)
	errors = Console(sys.stderr)

	console.header(f"Healthcare ML {constants.APP_NAME}")
	console.info(f"Repository root: {repo_root}")
	console.info(f"Configuration: {args.config}")
	console.info(f"Fix mode: {'ENABLED' if args.fix else 'DISABLED'}")
	if args.fix:
		console.warning("Fix mode does not modify artifacts; drift must be corrected by hand.")

	try:
		import yaml  # noqa: F401
	except ImportError:
		errors.error("Missing dependency: PyYAML")
		errors.info("Run: pip install pyyaml")
		return constants.EXIT_CONFIG_ERROR

	from modesync.validators.mapping_loader import load_modes

	try:
		modes = load_modes(args.config, repo_root=repo_root, log=console.success)
	except ConfigurationError as exc:
		errors.error(exc.message)
		return constants.EXIT_CONFIG_ERROR

	print_modes(console, modes)
	results = validate(modes, get_default_paths(repo_root))
	summary = report(console, results)
	return summary.exit_code


if __name__ == "__main__":
	raise SystemExit(main())
