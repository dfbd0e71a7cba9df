"""Recursive directory walker with ignore patterns and a depth bound.

The walker enumerates every regular file below a project root. It does not
classify anything; ``Scanner`` filters the result afterwards with
``is_agent_file``.

Traversal Rules:
    1. Depth-first, starting at the root with depth 0.
    2. Entries are visited in name order, so two walks over an unchanged
       tree return the same list.
    3. An entry whose root-relative path matches an ignore pattern is
       skipped together with its whole subtree.
    4. A directory at depth ``d`` is listed only while ``d <= max_depth``.
       With ``max_depth=0`` only files directly in the root are returned.
    5. Symbolic links are neither followed nor collected.

Failures below the root never abort the walk: a subdirectory that cannot
be listed contributes zero files. Permission errors are expected in real
projects and only logged at debug level; anything else is a warning.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from agent_composer.discovery.patterns import merge_ignore_patterns, should_ignore
from agent_composer.exceptions import RootUnreadableError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10


class DirectoryWalker:
    """Enumerates non-ignored files below a root directory.

    Usage::

        walker = DirectoryWalker(extra_ignore_patterns=["fixtures"])
        for path in walker.discover(Path("/path/to/project")):
            print(path)

    Attributes:
        ignore_patterns: Built-in patterns unioned with the extra ones.
        max_depth: Deepest directory level that is still listed.
    """

    def __init__(
        self,
        extra_ignore_patterns: Iterable[str] = (),
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.ignore_patterns = merge_ignore_patterns(extra_ignore_patterns)
        self.max_depth = max_depth

    def discover(self, root: Path) -> list[Path]:
        """Return every reachable, non-ignored file below ``root``.

        Args:
            root: Absolute path of the directory to walk.

        Returns:
            Absolute file paths in traversal order.

        Raises:
            RootUnreadableError: If ``root`` is missing, is not a
                directory, or cannot be listed.
        """
        entries = self._list_root(root)
        files: list[Path] = []
        self._visit_entries(entries, root, depth=0, files=files)
        return files

    def _list_root(self, root: Path) -> list[os.DirEntry[str]]:
        """List the root directory, converting failures to RootUnreadableError."""
        if not root.is_dir():
            raise RootUnreadableError(f"Not a readable directory: {root}")
        try:
            return self._sorted_entries(root)
        except OSError as exc:
            raise RootUnreadableError(f"Cannot list directory {root}: {exc}") from exc

    @staticmethod
    def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
        with os.scandir(directory) as iterator:
            return sorted(iterator, key=lambda entry: entry.name)

    def _walk(self, directory: Path, root: Path, depth: int, files: list[Path]) -> None:
        """List ``directory`` and visit its entries, tolerating I/O errors."""
        if depth > self.max_depth:
            return
        try:
            entries = self._sorted_entries(directory)
        except PermissionError:
            logger.debug("Permission denied: %s", directory)
            return
        except OSError as exc:
            logger.warning("Could not read directory %s: %s", directory, exc)
            return
        self._visit_entries(entries, root, depth, files)

    def _visit_entries(
        self,
        entries: list[os.DirEntry[str]],
        root: Path,
        depth: int,
        files: list[Path],
    ) -> None:
        for entry in entries:
            full_path = Path(entry.path)
            relative = full_path.relative_to(root).as_posix()
            if should_ignore(relative, self.ignore_patterns):
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    self._walk(full_path, root, depth + 1, files)
                elif entry.is_file(follow_symlinks=False):
                    files.append(full_path)
            except OSError as exc:
                logger.warning("Could not stat %s: %s", full_path, exc)


def discover(
    root: Path,
    extra_ignore_patterns: Iterable[str] = (),
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Path]:
    """Walk ``root`` with a one-off ``DirectoryWalker``.

    Args:
        root: Absolute path of the directory to walk.
        extra_ignore_patterns: Patterns added to the built-in ignore set.
        max_depth: Deepest directory level that is still listed.

    Returns:
        Absolute file paths in traversal order.
    """
    return DirectoryWalker(extra_ignore_patterns, max_depth).discover(root)
