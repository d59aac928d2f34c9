"""Tests for version lookup."""

from importlib.metadata import PackageNotFoundError

import pytest

from design_tokens import _version


def test_installed_version(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(_version, "version", lambda name: "1.2.3")
    assert _version.get_version() == "1.2.3"


def test_uninstalled_tree(monkeypatch: pytest.MonkeyPatch):
    def missing(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(_version, "version", missing)
    assert _version.get_version() == "0.0.0"
