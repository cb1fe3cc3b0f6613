"""File system utilities for the web.xml context parameter tools."""

import fnmatch
from pathlib import Path
from typing import Optional

import aiofiles


def find_files(
    root: Path,
    pattern: str,
    exclude_patterns: Optional[list[str]] = None,
) -> list[Path]:
    """Find files matching a glob pattern.

    Args:
        root: Root directory to search in.
        pattern: Glob pattern (e.g., "**/WEB-INF/web.xml").
        exclude_patterns: Patterns for files to exclude, matched against the
            path relative to root.

    Returns:
        Sorted list of matching file paths.
    """
    exclude_patterns = exclude_patterns or []
    matches = []

    if pattern.startswith("**/"):
        pattern = pattern[3:]
    pattern = pattern.lstrip("/")

    for path in root.rglob(pattern):
        if not path.is_file():
            continue

        relative = path.relative_to(root).as_posix()
        if not is_excluded(relative, exclude_patterns):
            matches.append(path)

    return sorted(matches)


def is_excluded(relative: str, exclude_patterns: list[str]) -> bool:
    """Check a relative POSIX path against exclusion globs.

    A leading "**/" in a pattern also matches at the top level, so
    "**/target/**" excludes "target/WEB-INF/web.xml".
    """
    for exclude in exclude_patterns:
        if fnmatch.fnmatch(relative, exclude) or fnmatch.fnmatch(f"/{relative}", exclude):
            return True
    return False


async def read_bytes_async(path: Path) -> bytes:
    """Read a file's raw bytes asynchronously.

    Args:
        path: Path to the file.

    Returns:
        File contents.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file can't be read.
    """
    async with aiofiles.open(path, "rb") as f:
        return await f.read()


def resolve_path(
    path: str | Path,
    base: Optional[Path] = None,
) -> Path:
    """Resolve a path, optionally relative to a base.

    Args:
        path: Path to resolve.
        base: Base directory for relative paths.

    Returns:
        Resolved absolute path.
    """
    path = Path(path)

    if path.is_absolute():
        return path.resolve()

    if base is not None:
        return (base / path).resolve()

    return path.resolve()


def is_yaml_file(path: Path) -> bool:
    """Check if a path is a YAML file.

    Args:
        path: File path to check.

    Returns:
        True if the file is a YAML file.
    """
    return path.suffix.lower() in (".yml", ".yaml")
