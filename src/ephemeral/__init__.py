"""Throwaway directory trees for integration tests.

This package describes a layout of directories and files in memory, writes that
layout to any location on disk, and removes it again once a test is done with it.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from ephemeral.builder import Builder, GenericBuilder, RustBuilder
from ephemeral.exceptions import (
    EphemeralError,
    IOFailureError,
    ManifestError,
    PathConflictError,
    PermissionDeniedError,
)
from ephemeral.project import Project
from ephemeral.tree.directory import Directory
from ephemeral.tree.file import File

# Expose the version for programmatic use
try:
    __version__ = version("ephemeral")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Shorter alias matching the common spelling in test code
Dir = Directory

__all__ = [
    "Builder",
    "Dir",
    "Directory",
    "EphemeralError",
    "File",
    "GenericBuilder",
    "IOFailureError",
    "ManifestError",
    "PathConflictError",
    "PermissionDeniedError",
    "Project",
    "RustBuilder",
]
