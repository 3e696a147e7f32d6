from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

import banner_gen

FAKE_PNG = banner_gen.PNG_SIGNATURE + b"fake-image-data"


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that creates a project directory with a README.md."""

    def _make(readme: str, name: str = "project") -> Path:
        project_dir = tmp_path / name
        project_dir.mkdir(parents=True, exist_ok=True)
        (project_dir / "README.md").write_text(textwrap.dedent(readme), encoding="utf-8")
        return project_dir

    return _make


@pytest.fixture
def fake_png_converter() -> Callable[[str], bytes]:
    def _convert(svg: str) -> bytes:
        return FAKE_PNG

    return _convert


@pytest.fixture
def failing_converter() -> Callable[[str], bytes]:
    def _convert(svg: str) -> bytes:
        raise banner_gen.RasterizationError("no PNG renderer available (tried: none)")

    return _convert
