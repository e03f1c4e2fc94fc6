import fnmatch
import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import NoInputError

logger = logging.getLogger(__name__)


def _is_excluded(relative: Path, exclude: Iterable[str]) -> bool:
    return any(
        fnmatch.fnmatch(part, pattern) for part in relative.parts for pattern in exclude
    )


def collect_files(
    paths: Iterable[Path],
    extensions: Iterable[str] = (".R", ".r"),
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Expand files and directories into a sorted list of R files.

    Directories are walked recursively and filtered by suffix and exclude
    patterns. Paths given explicitly are always kept, even when missing, so
    that an unreadable file is reported instead of silently dropped.
    """
    paths = list(paths)
    extensions = tuple(extensions)
    exclude = tuple(exclude)
    found: set[Path] = set()

    for path in paths:
        if path.is_dir():
            for candidate in path.rglob("*"):
                if candidate.suffix not in extensions or not candidate.is_file():
                    continue
                if _is_excluded(candidate.relative_to(path), exclude):
                    logger.debug("Skipping excluded %s", candidate)
                    continue
                found.add(candidate)
        else:
            found.add(path)

    if not found:
        shown = ", ".join(str(p) for p in paths) or "<none>"
        raise NoInputError(f"no R files found in {shown}")

    logger.debug("Collected %d file(s)", len(found))
    return sorted(found)
