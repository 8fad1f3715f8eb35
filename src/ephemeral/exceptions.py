import errno
import os
from typing import Optional

from ephemeral.types import PathType


class EphemeralError(Exception):
    """
    Base exception for every failure raised while building or clearing a project.

    Filesystem failures abort the remaining walk immediately, so the tree on disk may be
    left partially materialized or partially removed when one of these is raised.

    Attributes:
        path (Optional[str]): The path the failing operation was applied to, if any.
        cause (Optional[BaseException]): The underlying error, also available as __cause__.

    Example:
        >>> error = EphemeralError("something went wrong", path="tmp/foo")
        >>> error.path
        'tmp/foo'
        >>> str(error)
        'something went wrong'
    """

    def __init__(
        self, message: str, path: Optional[PathType] = None, cause: Optional[BaseException] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message (str): Human readable description of the failure.
            path (Optional[PathType]): Path the failing operation was applied to.
            cause (Optional[BaseException]): The underlying error.
        """
        self.message = message
        self.path = os.fspath(path) if path is not None else None
        self.cause = cause
        super().__init__(message)


class PathConflictError(EphemeralError):
    """
    Exception raised when an incompatible entry already exists at a path.

    This covers a regular file sitting where a directory has to be created, a directory
    sitting where a file has to be written, and a file standing in for an ancestor directory.

    Example:
        >>> error = PathConflictError("create directory failed for tmp: exists", path="tmp")
        >>> isinstance(error, EphemeralError)
        True
    """

    pass


class PermissionDeniedError(EphemeralError):
    """
    Exception raised when the process lacks the rights to create or remove a path.

    Example:
        >>> error = PermissionDeniedError("remove tree failed for /root: denied", path="/root")
        >>> error.path
        '/root'
    """

    pass


class IOFailureError(EphemeralError):
    """
    Exception raised for any other filesystem failure (disk full, name too long, etc.).
    """

    pass


class ManifestError(EphemeralError):
    """
    Exception raised when a project manifest cannot be constructed or serialized.

    Example:
        >>> error = ManifestError("Invalid version: 'one'")
        >>> error.path is None
        True
    """

    pass


_CONFLICT_ERRNOS = {errno.EEXIST, errno.ENOTDIR, errno.EISDIR, errno.ENOTEMPTY}


def from_os_error(action: str, path: PathType, error: OSError) -> EphemeralError:
    """
    Classify an OSError into the matching EphemeralError subclass.

    Args:
        action (str): Short description of the attempted operation, e.g. "create directory".
        path (PathType): Path the operation was applied to.
        error (OSError): The error raised by the filesystem call.

    Returns:
        EphemeralError: A PathConflictError, PermissionDeniedError or IOFailureError carrying
            the path and the original error. The caller is expected to raise it from `error`.

    Example:
        >>> err = from_os_error("write file", "tmp/foo", IsADirectoryError(21, "Is a directory"))
        >>> type(err).__name__
        'PathConflictError'
        >>> str(err)
        'write file failed for tmp/foo: [Errno 21] Is a directory'
    """
    message = f"{action} failed for {os.fspath(path)}: {error}"
    if isinstance(error, (FileExistsError, NotADirectoryError, IsADirectoryError)) or error.errno in _CONFLICT_ERRNOS:
        return PathConflictError(message, path=path, cause=error)
    if isinstance(error, PermissionError):
        return PermissionDeniedError(message, path=path, cause=error)
    return IOFailureError(message, path=path, cause=error)
