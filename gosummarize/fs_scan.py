from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from .config import settings
from .errors import DiscoveryError

log = logging.getLogger(__name__)

GO_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"


def is_go_file(path: str) -> bool:
	return path.endswith(GO_SUFFIX)


def is_test_file(path: str) -> bool:
	return path.endswith(TEST_SUFFIX)


def _is_candidate(path: str, exclude_tests: bool) -> bool:
	if not is_go_file(path):
		return False
	return not (exclude_tests and is_test_file(path))


def _raise_walk_error(err: OSError) -> None:
	raise DiscoveryError(err.filename or "", err.strerror or str(err)) from err


def find_go_files(
	root: str,
	exclude_tests: bool = False,
	skip_dirs: Optional[Iterable[str]] = None,
) -> List[str]:
	"""Return every ``.go`` file under ``root``, in sorted walk order.

	With ``exclude_tests`` set, files ending in ``_test.go`` are left out.
	Raises ``DiscoveryError`` when the root is missing or any directory in
	the tree cannot be read.
	"""
	if not os.path.lexists(root):
		raise DiscoveryError(root, "no such file or directory")
	if not os.path.isdir(root):
		return [root] if _is_candidate(root, exclude_tests) else []

	skip = set(settings.skip_dirs if skip_dirs is None else skip_dirs)
	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
		dirnames[:] = sorted(d for d in dirnames if d not in skip)
		for filename in sorted(filenames):
			path = os.path.join(dirpath, filename)
			if _is_candidate(path, exclude_tests):
				files.append(path)
	log.debug("found %d Go files under %s", len(files), root)
	return files
