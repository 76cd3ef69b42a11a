"""Scoped temporary files for strategies that need random access."""

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)


@contextmanager
def scoped_temp_file(
    data: bytes,
    filename: str,
    temp_dir: Optional[Union[str, Path]] = None,
) -> Iterator[Path]:
    """
    Write bytes to a file inside a private temporary directory.

    The directory and everything in it are removed when the block exits,
    whether it exits normally or by an exception.

    Args:
        data: Content to write.
        filename: Name of the file inside the private directory.
        temp_dir: Optional parent directory; the system default otherwise.

    Yields:
        Path to the written file.
    """
    directory = Path(tempfile.mkdtemp(dir=temp_dir))
    try:
        path = directory / filename
        path.write_bytes(data)
        logger.debug(f"Temporary file created at: {path}")
        yield path
    finally:
        shutil.rmtree(directory, ignore_errors=True)
        if directory.exists():
            logger.warning(f"Could not remove temporary directory: {directory}")
        else:
            logger.debug(f"Temporary directory cleaned up: {directory}")
