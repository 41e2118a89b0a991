"""Image loading into raw pixel data ready for upload as a 2D texture."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError


class TextureError(Exception):
    """Raised when an image cannot be loaded as a texture."""


class PixelFormat(Enum):
    """Texture pixel layouts, valued by their number of 8-bit channels."""

    RED = 1
    RGB = 3
    RGBA = 4

    @property
    def channels(self) -> int:
        return self.value


@dataclass(frozen=True)
class TextureImage:
    """Decoded 8-bit pixel rows, tightly packed, first row first."""

    width: int
    height: int
    format: PixelFormat
    pixels: bytes

    @property
    def channels(self) -> int:
        return self.format.channels

    def as_array(self) -> np.ndarray:
        """Return the pixels as a ``(height, width, channels)`` uint8 array."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(
            self.height, self.width, self.channels
        )


_SIXTEEN_BIT = {"I;16", "I;16B", "I;16L", "I;16N", "I"}


def _normalise(image: Image.Image) -> Image.Image:
    """Bring an image to an 8-bit mode whose channel count matches its file."""
    mode = image.mode
    if mode in ("L", "LA", "RGB", "RGBA"):
        return image
    if mode == "1":
        return image.convert("L")
    if mode in ("P", "PA"):
        has_alpha = mode == "PA" or "transparency" in image.info
        return image.convert("RGBA" if has_alpha else "RGB")
    if mode in _SIXTEEN_BIT:
        data = (np.asarray(image).astype(np.int64) >> 8).clip(0, 255).astype(np.uint8)
        return Image.fromarray(data, mode="L")
    if mode == "F":
        return image.convert("L")
    raise TextureError(f"unsupported image mode {mode!r}")


def load_texture(path, flip_vertically: bool = True) -> TextureImage:
    """Load an image file as texture data; by default the bottom row comes first."""
    path = Path(path)
    try:
        with Image.open(path) as source:
            source.load()
            image = _normalise(source)
    except (FileNotFoundError, UnidentifiedImageError, OSError) as exc:
        raise TextureError(f"texture failed to load at path: {path}") from exc

    components = len(image.getbands())
    try:
        pixel_format = PixelFormat(components)
    except ValueError:
        raise TextureError(
            f"unsupported texture format for: {path} (components: {components})"
        ) from None

    if flip_vertically:
        image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

    return TextureImage(
        width=image.width,
        height=image.height,
        format=pixel_format,
        pixels=image.tobytes(),
    )