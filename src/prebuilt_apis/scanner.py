from __future__ import annotations

from pathlib import Path


def glob_files(root: Path, pattern: str) -> list[str]:
    """Find files under root matching a glob pattern.

    Args:
        root: Directory the pattern is evaluated against.
        pattern: A relative glob such as `*/*/api/*.txt`.

    Returns:
        Sorted unique list of POSIX paths relative to root.
    """
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    files: set[str] = set()
    for p in root.glob(pattern):
        if not p.is_file():
            continue
        files.add(p.relative_to(root).as_posix())
    return sorted(files)
