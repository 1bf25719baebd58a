"""
Source file locator for srcedit.

This module walks the configured source root and returns the regular files
whose path matches a case-insensitive regular expression. Hidden entries are
skipped unless the configuration asks for them, and the traversal is sorted
so an unchanged tree always yields the same order.
"""

import os
import re
import stat
from pathlib import Path
from typing import Dict, List, Iterator
import logging

from ..errors import InvalidPattern, NoSuchDirectory
from ..models.config import SrceditConfig


logger = logging.getLogger(__name__)


class Locator:
    """
    Finds files under the source root whose path matches a pattern.

    Paths are reported joined to ``source_root`` exactly as configured
    (``src/a/foo.txt`` for the default root), which is also the string the
    pattern is matched against. Stages run from the project directory, so
    these paths are valid editor arguments as-is.
    """

    def __init__(self, config: SrceditConfig):
        """
        Initialize the locator.

        Args:
            config: Configuration holding the source root and hidden-file policy
        """
        self.config = config
        self._stats = self._empty_stats()

    def locate(self, pattern: str) -> List[str]:
        """
        Return the matching files under the source root.

        Args:
            pattern: Regular expression, matched case-insensitively anywhere in the path

        Returns:
            Sorted-traversal list of matching paths; empty when nothing matches

        Raises:
            NoSuchDirectory: If the source root is missing or not a directory
            InvalidPattern: If the pattern does not compile
        """
        root_path = self.config.get_root_path()
        if not root_path.is_dir():
            raise NoSuchDirectory(str(root_path))

        regex = self._compile_pattern(pattern)

        logger.info(f"Searching {root_path} for '{pattern}'")
        matches = list(self._walk_matches(root_path, regex))
        logger.debug(f"Locator stats: {self._stats}")
        return matches

    def _compile_pattern(self, pattern: str) -> re.Pattern:
        try:
            return re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise InvalidPattern(pattern, str(e)) from e

    def _walk_matches(self, root_path: Path, regex: re.Pattern) -> Iterator[str]:
        """
        Recursively walk the root and yield matching file paths.

        Args:
            root_path: Directory to walk, as seen from this process
            regex: Compiled pattern

        Yields:
            Reported paths of matching regular files
        """
        for current_dir, subdirs, files in os.walk(root_path, onerror=self._on_walk_error):
            self._stats['directories_traversed'] += 1

            # Prune and order in place so os.walk follows the same sequence
            subdirs[:] = sorted(d for d in subdirs if not self._is_hidden(d))

            relative_dir = os.path.relpath(current_dir, root_path)
            for filename in sorted(files):
                if self._is_hidden(filename):
                    self._stats['files_skipped'] += 1
                    continue

                # Symlinks, sockets and FIFOs also land in ``files``
                if not self._is_regular_file(os.path.join(current_dir, filename)):
                    self._stats['files_skipped'] += 1
                    continue

                self._stats['files_scanned'] += 1
                reported = self._report_path(relative_dir, filename)
                if regex.search(reported):
                    self._stats['files_matched'] += 1
                    yield reported

    def _report_path(self, relative_dir: str, filename: str) -> str:
        if relative_dir == os.curdir:
            return os.path.join(self.config.source_root, filename)
        return os.path.join(self.config.source_root, relative_dir, filename)

    @staticmethod
    def _is_regular_file(path: str) -> bool:
        """Check the entry itself, without following symlinks, as ``fd --type file`` does."""
        try:
            return stat.S_ISREG(os.lstat(path).st_mode)
        except OSError:
            # Removed between listing and lstat
            return False

    def _is_hidden(self, name: str) -> bool:
        return not self.config.include_hidden and name.startswith('.')

    def _on_walk_error(self, error: OSError) -> None:
        logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")
        self._stats['errors'] += 1

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'directories_traversed': 0,
            'files_scanned': 0,
            'files_matched': 0,
            'files_skipped': 0,
            'errors': 0
        }

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the last walk(s).

        Returns:
            Dictionary containing walk counters
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()


def locate(pattern: str, config: SrceditConfig) -> List[str]:
    """
    Convenience function to locate files with a fresh Locator.

    Args:
        pattern: Case-insensitive regular expression
        config: Configuration holding the source root

    Returns:
        List of matching paths
    """
    return Locator(config).locate(pattern)
