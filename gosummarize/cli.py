from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import uvicorn

from .config import settings
from .errors import DiscoveryError
from .fs_scan import find_go_files
from .logging_setup import setup_logging
from .summarize import summarize_files


def main(argv: Optional[List[str]] = None) -> int:
	parser = argparse.ArgumentParser(
		prog="gosummarize",
		description="Print the exported declarations of every Go file under a directory",
	)
	parser.add_argument(
		"-t",
		dest="exclude_tests",
		action="store_true",
		default=settings.exclude_tests,
		help="Ignore test files (files ending with _test.go)",
	)
	parser.add_argument("directory", help="Root directory to scan")
	args = parser.parse_args(argv)
	setup_logging()

	try:
		files = find_go_files(args.directory, args.exclude_tests)
	except DiscoveryError as e:
		print(f"Error finding Go files: {e}", file=sys.stderr)
		return 1

	if not files:
		print("No Go files found in the specified directory or its subdirectories")
		return 0

	# parse errors are logged per file and do not change the exit code
	summarize_files(files, sys.stdout)
	return 0


def serve_main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="gosummarize-serve")
	parser.add_argument("--host", default=settings.host)
	parser.add_argument("--port", type=int, default=settings.port)
	parser.add_argument("--reload", action="store_true")
	args = parser.parse_args(argv)
	setup_logging()
	uvicorn.run("gosummarize.api:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
	sys.exit(main())
