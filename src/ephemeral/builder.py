"""Builders that assemble a Project before writing it to disk.

GenericBuilder produces plain directory layouts. RustBuilder additionally knows how to
generate a Cargo.toml for the project root, for tests that run cargo or cargo plugins
against a throwaway crate.
"""

import copy
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ephemeral.exceptions import ManifestError
from ephemeral.project import Project
from ephemeral.rust_tools import Edition, Manifest
from ephemeral.tree.directory import Directory
from ephemeral.types import PathType

logger = logging.getLogger(__name__)

CARGO_TOML = "Cargo.toml"


class Builder(ABC):
    """
    Abstract base class for project builders.

    Concrete builders own a Project and expose it through the project property. Adding
    directories is fluent and build() materializes the project, returning it for a later
    clear().

    Example:
        >>> builder = GenericBuilder("tmp").add_dir(Directory("tmp/foo").add_file("bar", b"e"))
        >>> project = builder.build()  # doctest: +SKIP
        >>> project.clear()  # doctest: +SKIP
    """

    def add_dir(self, directory: Directory) -> "Builder":
        self.project.add_dir(directory)
        return self

    def build(self) -> Project:
        """Write the project to disk and return it.

        Raises:
            EphemeralError: If any directory or file cannot be created.
        """
        return self.project.build()

    @property
    @abstractmethod
    def project(self) -> Project:
        """The project being assembled."""
        pass


class GenericBuilder(Builder):
    """Builder for a plain directory layout rooted at path."""

    def __init__(self, path: PathType) -> None:
        self.path = Path(os.fspath(path))
        self._project = Project(path)

    @property
    def project(self) -> Project:
        return self._project


class RustBuilder(Builder):
    """Builder for a Rust crate layout with a generated Cargo.toml.

    Attributes:
        path (Path): Root path of the crate.
        manifest (Manifest): Manifest written by add_cargo_toml().

    Example:
        >>> manifest = Manifest.try_from("foo", "0.1.0", ["foo <foo@bar.com>"])
        >>> builder = RustBuilder("foo").add_cargo_toml(manifest)
        >>> [f.name for f in builder.project.root.files]
        ['Cargo.toml']
    """

    def __init__(self, path: PathType) -> None:
        self.path = Path(os.fspath(path))
        self._project = Project(path)
        self.manifest = Manifest()

    @property
    def project(self) -> Project:
        return self._project

    def add_cargo_toml(self, manifest: Manifest) -> "RustBuilder":
        """Use manifest for the project and add it as Cargo.toml to the root directory.

        A Cargo.toml added earlier is replaced.
        """
        self.manifest = manifest
        self._write_cargo_toml()
        return self

    def edition(self, edition: Union[Edition, str]) -> "RustBuilder":
        """Set the manifest edition, regenerating Cargo.toml if one was added.

        The builder switches to a copy of its manifest, so a Manifest passed to
        add_cargo_toml() is left unchanged.

        Raises:
            ManifestError: If edition is not a known Rust edition.
        """
        try:
            new_edition = Edition(edition)
        except ValueError as e:
            raise ManifestError(f"Unknown edition {edition!r}", cause=e) from e
        manifest = copy.copy(self.manifest)
        manifest.package = copy.copy(manifest.package)
        manifest.package.edition = new_edition
        self.manifest = manifest
        if self._cargo_toml_added():
            self._write_cargo_toml()
        return self

    def _cargo_toml_added(self) -> bool:
        return any(file.name == CARGO_TOML for file in self._project.root.files)

    def _write_cargo_toml(self) -> None:
        for file in self._project.root.files:
            if file.name == CARGO_TOML:
                file.parent = None
        self._project.add_file(CARGO_TOML, bytes(self.manifest))
        logger.debug("Added %s for crate %r", CARGO_TOML, self.manifest.package.name)
