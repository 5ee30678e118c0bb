"""Test configuration and fixtures for raster_points.

This module provides:
- Image fixtures written to tmp_path with Pillow (PNG, JPEG, transparent)
- A loguru capture fixture for asserting on log output
"""

from collections.abc import Iterator
from pathlib import Path

import numpy as np
import pytest
from loguru import logger
from numpy.typing import NDArray
from PIL import Image

# ============================================================================
# Helpers
# ============================================================================


def make_rgba_array(width: int, height: int, seed: int = 0) -> NDArray[np.uint8]:
    """Deterministic random RGBA pixels, fully opaque."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    return pixels


def write_png(path: Path, pixels: NDArray[np.uint8]) -> Path:
    Image.fromarray(pixels).save(path, format="PNG")
    return path


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def square_pixels() -> NDArray[np.uint8]:
    return make_rgba_array(100, 100, seed=1)


@pytest.fixture
def square_png(tmp_path: Path, square_pixels: NDArray[np.uint8]) -> Path:
    """100x100 opaque PNG with random pixels."""
    return write_png(tmp_path / "square.png", square_pixels)


@pytest.fixture
def wide_pixels() -> NDArray[np.uint8]:
    return make_rgba_array(64, 32, seed=2)


@pytest.fixture
def wide_png(tmp_path: Path, wide_pixels: NDArray[np.uint8]) -> Path:
    """64x32 opaque PNG (2:1 aspect ratio)."""
    return write_png(tmp_path / "wide.png", wide_pixels)


@pytest.fixture
def transparent_png(tmp_path: Path) -> Path:
    """2x1 PNG: left pixel fully transparent, right pixel opaque, same RGB."""
    pixels = np.array([[[10, 20, 30, 0], [10, 20, 30, 255]]], dtype=np.uint8)
    return write_png(tmp_path / "transparent.png", pixels)


@pytest.fixture
def transparent_square_png(tmp_path: Path) -> Path:
    """8x8 PNG where every pixel is (10, 20, 30) with alpha 0."""
    pixels = np.zeros((8, 8, 4), dtype=np.uint8)
    pixels[:, :, :3] = (10, 20, 30)
    return write_png(tmp_path / "transparent_square.png", pixels)


@pytest.fixture
def sample_jpeg(tmp_path: Path) -> Path:
    """48x36 JPEG (RGB, no alpha)."""
    path = tmp_path / "sample.jpg"
    Image.new("RGB", (48, 36), (200, 100, 50)).save(path, format="JPEG")
    return path


@pytest.fixture
def corrupt_file(tmp_path: Path) -> Path:
    """A .png file whose content is not an image."""
    path = tmp_path / "corrupt.png"
    _ = path.write_bytes(b"this is definitely not a png")
    return path


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
