import numpy as np
import pytest
from PIL import Image

from planetview.texture import PixelFormat, TextureError, TextureImage, load_texture


def _save(tmp_path, image, name="img.png"):
    path = tmp_path / name
    image.save(path)
    return path


def _two_row_rgb(tmp_path):
    image = Image.new("RGB", (1, 2))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((0, 1), (0, 0, 255))
    return _save(tmp_path, image)


def test_rgb_dimensions_and_format(tmp_path):
    path = _save(tmp_path, Image.new("RGB", (4, 3), (10, 20, 30)))
    tex = load_texture(path)
    assert (tex.width, tex.height) == (4, 3)
    assert tex.format is PixelFormat.RGB
    assert len(tex.pixels) == 4 * 3 * 3
    assert tex.as_array()[0, 0].tolist() == [10, 20, 30]


def test_flip_puts_bottom_row_first(tmp_path):
    tex = load_texture(_two_row_rgb(tmp_path))
    assert tex.as_array()[0, 0].tolist() == [0, 0, 255]
    assert tex.as_array()[1, 0].tolist() == [255, 0, 0]


def test_no_flip_keeps_top_row_first(tmp_path):
    tex = load_texture(_two_row_rgb(tmp_path), flip_vertically=False)
    assert tex.as_array()[0, 0].tolist() == [255, 0, 0]


def test_flip_reverses_rows(tmp_path):
    path = _two_row_rgb(tmp_path)
    flipped = load_texture(path).as_array()
    plain = load_texture(path, False).as_array()
    assert np.array_equal(flipped, plain[::-1])


def test_grayscale_is_red(tmp_path):
    tex = load_texture(_save(tmp_path, Image.new("L", (2, 2), 7)))
    assert tex.format is PixelFormat.RED
    assert tex.channels == 1
    assert tex.pixels == bytes([7, 7, 7, 7])


def test_rgba_is_rgba(tmp_path):
    tex = load_texture(_save(tmp_path, Image.new("RGBA", (1, 1), (1, 2, 3, 4))))
    assert tex.format is PixelFormat.RGBA
    assert tex.pixels == bytes([1, 2, 3, 4])


def test_palette_with_transparency_becomes_rgba(tmp_path):
    image = Image.new("P", (2, 2), 0)
    image.putpalette([255, 0, 0] * 256)
    image.info["transparency"] = 0
    path = tmp_path / "pal.png"
    image.save(path, transparency=0)
    assert load_texture(path).format is PixelFormat.RGBA


def test_palette_without_transparency_becomes_rgb(tmp_path):
    image = Image.new("P", (2, 2), 0)
    image.putpalette([0, 255, 0] * 256)
    tex = load_texture(_save(tmp_path, image))
    assert tex.format is PixelFormat.RGB
    assert tex.as_array()[0, 0].tolist() == [0, 255, 0]


def test_gray_alpha_is_unsupported(tmp_path):
    with pytest.raises(TextureError):
        load_texture(_save(tmp_path, Image.new("LA", (2, 2))))


def test_missing_file_raises(tmp_path):
    with pytest.raises(TextureError):
        load_texture(tmp_path / "absent.png")


def test_non_image_raises(tmp_path):
    path = tmp_path / "bogus.png"
    path.write_text("not an image")
    with pytest.raises(TextureError):
        load_texture(path)


@pytest.mark.parametrize(
    "mode, expected, channels",
    [
        ("L", PixelFormat.RED, 1),
        ("RGB", PixelFormat.RGB, 3),
        ("RGBA", PixelFormat.RGBA, 4),
    ],
)
def test_loaded_format_channels(tmp_path, mode, expected, channels):
    tex = load_texture(_save(tmp_path, Image.new(mode, (2, 1))))
    assert tex.format is expected
    assert tex.format.channels == channels
    assert tex.channels == channels
    assert len(tex.pixels) == 2 * 1 * channels


def test_texture_image_as_array_shape():
    tex = TextureImage(width=2, height=1, format=PixelFormat.RGB, pixels=bytes(range(6)))
    assert tex.as_array().shape == (1, 2, 3)
    assert tex.as_array()[0, 1].tolist() == [3, 4, 5]