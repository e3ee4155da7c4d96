"""Crash-safe file replacement."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_bytes_atomic(
    *,
    path: Path,
    data: bytes,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Replace ``path`` with ``data`` so readers see the old or the new file, never a partial one.

    The bytes are staged in a sibling temp file and flushed to disk before the
    rename. The temp file is removed if any step fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, staged = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    staged_path = Path(staged)
    try:
        with os.fdopen(fd, "wb") as stream:
            stream.write(data)
            stream.flush()
            os.fsync(stream.fileno())
        os.replace(staged_path, path)
    except BaseException:
        staged_path.unlink(missing_ok=True)
        raise
