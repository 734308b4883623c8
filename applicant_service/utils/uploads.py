"""Helpers for spooling uploaded files to local disk."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO

from ..core.logging import get_logger

logger = get_logger(__name__)


def copy_to_temp_file(source: BinaryIO, filename: str | None = None) -> str:
    """Copy an uploaded stream into a new temporary file.

    The suffix of ``filename`` is kept so the image host can infer the type.

    Returns:
        Path of the temporary file; the caller removes it
    """
    suffix = Path(filename).suffix if filename else ""
    source.seek(0)
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as target:
        shutil.copyfileobj(source, target)
        return target.name


def remove_file(path: str) -> None:
    """Remove a temporary file, ignoring one that is already gone."""
    try:
        os.remove(path)
    except FileNotFoundError:
        logger.debug("Temporary file already removed", extra={'path': path})
