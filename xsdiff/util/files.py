"""
File utility functions.
"""

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


def ensure_dir(path: str | Path) -> Path:
    """Ensure directory exists, creating if necessary."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def read_lines(path: str | Path) -> list[str]:
    """Read a text file as a list of lines without line terminators."""
    return Path(path).read_text(encoding="utf-8").splitlines()


@contextmanager
def atomic_path(path: str | Path) -> Iterator[Path]:
    """
    Yield a temporary path that replaces `path` once the block completes.

    Readers never see a half-written file; on error the temporary file is removed.

    Usage:
        with atomic_path(report_dir / "report.xlsx") as tmp:
            workbook.save(tmp)
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    os.close(fd)
    tmp = Path(tmp_name)
    try:
        yield tmp
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            tmp.unlink()


def write_text(path: str | Path, content: str) -> None:
    """Write text to file atomically, creating parent directories if needed."""
    with atomic_path(path) as tmp:
        tmp.write_text(content, encoding="utf-8")
