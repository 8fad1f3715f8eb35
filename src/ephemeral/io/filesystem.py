"""Filesystem primitives used to materialize and tear down a project.

Every OSError raised by the host filesystem is translated into an EphemeralError
subclass carrying the offending path. Nothing is retried.
"""

import logging
import os
import shutil
from pathlib import Path

from ephemeral.exceptions import from_os_error
from ephemeral.types import PathType

logger = logging.getLogger(__name__)


def make_dirs(path: PathType) -> None:
    """Create a directory and any missing ancestors. An existing directory is left alone.

    Raises:
        PathConflictError: If a non-directory entry exists at path or at one of its ancestors.
        PermissionDeniedError: If the directory cannot be created for lack of rights.
        IOFailureError: On any other filesystem failure.
    """
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise from_os_error("create directory", path, e) from e
    logger.debug("Created directory %s", path)


def write_file(path: PathType, content: bytes) -> None:
    """Write content to path, truncating any existing file.

    Raises:
        PathConflictError: If a directory exists at path.
        PermissionDeniedError: If the file cannot be written for lack of rights.
        IOFailureError: On any other filesystem failure, including a missing parent directory.
    """
    try:
        Path(path).write_bytes(content)
    except OSError as e:
        raise from_os_error("write file", path, e) from e
    logger.debug("Wrote %d bytes to %s", len(content), path)


def remove_tree(path: PathType) -> bool:
    """Recursively remove the directory at path and everything beneath it.

    Returns:
        True if something was removed, False if nothing existed at path.

    Raises:
        PathConflictError: If path is not a directory.
        PermissionDeniedError: If an entry cannot be removed for lack of rights.
        IOFailureError: On any other filesystem failure.
    """
    if not os.path.lexists(path):
        logger.debug("Nothing to remove at %s", path)
        return False
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise from_os_error("remove tree", path, e) from e
    logger.debug("Removed tree %s", path)
    return True
