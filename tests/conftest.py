"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

ImageFactory = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def _noise_image(size: tuple[int, int] = (8, 6), mode: str = "RGB") -> Image.Image:
    """Build a deterministic noise image of ``size`` (width, height)."""
    rng = np.random.default_rng(0)
    width, height = size
    pixels = rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
    image = Image.fromarray(pixels)
    if mode != "RGB":
        image = image.convert(mode)
    return image


@pytest.fixture
def sample_image() -> Callable[..., Image.Image]:
    """Return a helper building deterministic in-memory sample images."""
    return _noise_image


@pytest.fixture
def make_image() -> ImageFactory:
    """Return a helper writing a sample image to disk in a Pillow format."""

    def _make(
        path: Path,
        pil_format: str,
        size: tuple[int, int] = (8, 6),
        mode: str = "RGB",
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _noise_image(size, mode).save(path, format=pil_format)
        return path

    return _make
