"""Cargo manifest model used by RustBuilder to generate Cargo.toml files."""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import semver
import tomli_w

from ephemeral.exceptions import ManifestError

VersionType = Union[str, semver.Version]


class Edition(str, Enum):
    """Rust edition written to the package section of Cargo.toml.

    Values:
        EDITION_2015: The 2015 edition
        EDITION_2018: The 2018 edition (default)
        EDITION_2021: The 2021 edition
    """

    EDITION_2015 = "2015"
    EDITION_2018 = "2018"
    EDITION_2021 = "2021"

    @classmethod
    def default(cls) -> "Edition":
        return cls.EDITION_2018


def parse_version(version: VersionType) -> semver.Version:
    """Parse a SemVer string, raising ManifestError when it is not valid.

    Example:
        >>> str(parse_version("0.1.0"))
        '0.1.0'
    """
    if isinstance(version, semver.Version):
        return version
    try:
        return semver.Version.parse(version)
    except (TypeError, ValueError) as e:
        raise ManifestError(f"Invalid version {version!r}: {e}", cause=e) from e


class Config:
    """The [package] section of a Cargo manifest.

    Attributes:
        name (str): Crate name.
        version (semver.Version): Crate version.
        authors (List[str]): Crate authors.
        edition (Edition): Rust edition.
    """

    def __init__(
        self,
        name: str = "",
        version: VersionType = "0.0.0",
        authors: Optional[Sequence[str]] = None,
        edition: Optional[Union[Edition, str]] = None,
    ) -> None:
        self.name = name
        self.version = parse_version(version)
        self.authors: List[str] = list(authors) if authors is not None else []
        self.edition = Edition(edition) if edition is not None else Edition.default()

    @classmethod
    def try_from(
        cls,
        name: str,
        version: VersionType,
        authors: Sequence[str],
        edition: Optional[Union[Edition, str]] = None,
    ) -> "Config":
        """Build a Config, validating the version and edition.

        Raises:
            ManifestError: If version is not valid SemVer or edition is unknown.
        """
        try:
            return cls(name, version, authors, edition)
        except ValueError as e:
            # Edition("2000") and the like
            raise ManifestError(f"Invalid package configuration for {name!r}: {e}", cause=e) from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": str(self.version),
            "authors": list(self.authors),
            "edition": self.edition.value,
        }

    def __repr__(self) -> str:
        return (
            f"Config(name={self.name!r}, version={str(self.version)!r}, "
            f"authors={self.authors!r}, edition={self.edition.value!r})"
        )


class Manifest:
    """A Cargo manifest: the package section plus optional dependencies.

    Example:
        >>> manifest = Manifest.try_from("foo", "0.1.0", [], Edition.EDITION_2018)
        >>> print(manifest.to_toml(), end="")
        [package]
        name = "foo"
        version = "0.1.0"
        authors = []
        edition = "2018"
    """

    def __init__(self, package: Optional[Config] = None, dependencies: Optional[Mapping[str, VersionType]] = None):
        self.package = package if package is not None else Config()
        self.dependencies: Optional[Dict[str, semver.Version]] = None
        if dependencies is not None:
            self.dependencies = {name: parse_version(version) for name, version in dependencies.items()}

    @classmethod
    def try_from(
        cls,
        name: str,
        version: VersionType,
        authors: Sequence[str],
        edition: Optional[Union[Edition, str]] = None,
        dependencies: Optional[Mapping[str, VersionType]] = None,
    ) -> "Manifest":
        """Build a Manifest from plain values.

        Raises:
            ManifestError: If any version is not valid SemVer or the edition is unknown.
        """
        return cls(Config.try_from(name, version, authors, edition), dependencies)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"package": self.package.to_dict()}
        if self.dependencies:
            data["dependencies"] = {name: str(version) for name, version in self.dependencies.items()}
        return data

    def to_toml(self) -> str:
        return tomli_w.dumps(self.to_dict())

    def __bytes__(self) -> bytes:
        return self.to_toml().encode("utf-8")

    def __repr__(self) -> str:
        return f"Manifest(package={self.package!r}, dependencies={self.to_dict().get('dependencies')!r})"
