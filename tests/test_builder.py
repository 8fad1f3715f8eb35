"""Tests for the generic and Rust project builders."""

import tomllib
from pathlib import Path

import pytest

from ephemeral.builder import Builder, GenericBuilder, RustBuilder
from ephemeral.exceptions import ManifestError
from ephemeral.project import Project
from ephemeral.rust_tools import Edition, Manifest
from ephemeral.tree.directory import Directory


def test_builder_is_abstract():
    with pytest.raises(TypeError):
        Builder()  # type: ignore[abstract]


def test_generic_builder_initialization():
    builder = GenericBuilder("tmp")
    assert builder.path == Path("tmp")
    assert isinstance(builder.project, Project)
    assert builder.project.path == Path("tmp")


def test_generic_builder_empty_build_creates_dir(tmp_path):
    path = tmp_path / "tmp"
    project = GenericBuilder(path).build()
    assert path.is_dir()
    project.clear()
    assert not path.exists()


def test_generic_builder_with_dir_and_files(tmp_path):
    path = tmp_path / "tmp2"
    builder = GenericBuilder(path)
    assert builder.add_dir(Directory(path / "foo").add_file("bar", bytes([101]))) is builder

    project = builder.build()
    assert (path / "foo").is_dir()
    assert (path / "foo" / "bar").read_bytes() == b"e"

    project.clear()
    assert not path.exists()


@pytest.fixture
def manifest():
    return Manifest.try_from("foo", "0.1.0", ["foo <foo@bar.com>"], Edition.EDITION_2018)


def test_rust_builder_creates_rust_project(tmp_path, manifest):
    path = tmp_path / "foo"
    project = RustBuilder(path).add_cargo_toml(manifest).build()

    assert path.is_dir()
    cargo_toml = path / "Cargo.toml"
    assert cargo_toml.is_file()
    assert tomllib.loads(cargo_toml.read_text("utf-8"))["package"]["name"] == "foo"

    project.clear()
    assert not path.exists()


def test_rust_builder_default_manifest():
    builder = RustBuilder("foo")
    assert builder.manifest.package.edition is Edition.EDITION_2018
    assert builder.project.root.files == ()


def test_rust_builder_replaces_cargo_toml(manifest):
    other = Manifest.try_from("bar", "1.0.0", [])
    builder = RustBuilder("foo").add_cargo_toml(manifest).add_cargo_toml(other)

    files = builder.project.root.files
    assert [f.name for f in files] == ["Cargo.toml"]
    assert tomllib.loads(files[0].content.decode("utf-8"))["package"]["name"] == "bar"
    assert builder.manifest is other


def test_rust_builder_edition_regenerates_cargo_toml(manifest):
    builder = RustBuilder("foo").add_cargo_toml(manifest).edition(Edition.EDITION_2021)

    files = builder.project.root.files
    assert len(files) == 1
    assert tomllib.loads(files[0].content.decode("utf-8"))["package"]["edition"] == "2021"


def test_rust_builder_edition_before_cargo_toml():
    builder = RustBuilder("foo").edition("2015")
    assert builder.manifest.package.edition is Edition.EDITION_2015
    assert builder.project.root.files == ()


def test_rust_builder_with_sources(tmp_path, manifest):
    path = tmp_path / "crate"
    builder = RustBuilder(path).add_cargo_toml(manifest)
    builder.add_dir(Directory(path / "src").add_file("main.rs", b"fn main() {}\n"))

    project = builder.build()
    assert (path / "Cargo.toml").is_file()
    assert (path / "src" / "main.rs").read_bytes() == b"fn main() {}\n"
    project.clear()


def test_rust_builder_edition_leaves_caller_manifest_unchanged(manifest):
    builder = RustBuilder("foo").add_cargo_toml(manifest).edition(Edition.EDITION_2015)

    assert manifest.package.edition is Edition.EDITION_2018
    assert builder.manifest.package.edition is Edition.EDITION_2015
    assert builder.manifest.package.name == "foo"
    assert b'edition = "2018"' in bytes(manifest)


def test_rust_builder_unknown_edition():
    with pytest.raises(ManifestError, match="Unknown edition '2000'"):
        RustBuilder("foo").edition("2000")
