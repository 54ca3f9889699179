import logging
import os

import pytest
from PIL import Image as PILImage

from rasm.api.image import Image
from rasm.constants import OutputFormat
from rasm.errors import ConfigurationError
from rasm.formats import ENCODERS, OutputTarget, get_format, write_jpg, write_png

from .utils import HALF_BLUE, RED

logger = logging.getLogger(__name__)


def test_registry() -> None:
    assert set(ENCODERS) == set(OutputFormat)
    assert ENCODERS[OutputFormat.PNG] is write_png
    assert write_jpg.format == OutputFormat.JPG


def test_get_format() -> None:
    assert get_format("png") is OutputFormat.PNG
    with pytest.raises(ConfigurationError):
        get_format("tiff")


def test_target_filename() -> None:
    target = OutputTarget("jpg", Image.new(1, 1))
    assert target.filename("out/poster") == os.path.join("out", "poster") + ".jpg"


def test_target_png_color_type(tmp_path) -> None:
    target = OutputTarget(OutputFormat.PNG, Image.new(2, 2, RED))
    target.color_type = "RGB"
    path = target.write(os.fspath(tmp_path / "rgb"))
    with PILImage.open(path) as image:
        assert image.mode == "RGB"
        assert image.getpixel((1, 1)) == RED[:3]


def test_target_invalid_color_type() -> None:
    target = OutputTarget("png", Image.new(1, 1))
    with pytest.raises(ConfigurationError):
        target.color_type = "CMYK"


def test_target_bit_depth() -> None:
    target = OutputTarget("png", Image.new(1, 1))
    assert target.bit_depth == 8
    with pytest.raises(ConfigurationError):
        target.bit_depth = 16


def test_jpg_drops_alpha(tmp_path, caplog) -> None:
    target = OutputTarget("jpg", Image.new(2, 2, HALF_BLUE))
    with caplog.at_level(logging.WARNING, logger="rasm.formats"):
        path = target.write(os.fspath(tmp_path / "alpha"))
    assert "alpha" in caplog.text
    with PILImage.open(path) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"
