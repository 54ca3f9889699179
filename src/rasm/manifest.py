"""
Manifest loading and rendering.

A manifest is a TOML file describing the canvas and the objects drawn on it,
in paint order::

    format = "png"
    size = [1080, 1080]
    color = [255, 255, 255, 255]

    [[objects]]
    name = "rect"
    origin = [0, 0]
    offset = [100, 50]
    color = [255, 0, 0, 255]

    [[objects]]
    name = "image"
    src = "photo.jpg"
    origin = [25, 25]
    resize = [50, 0]

Positions and sizes of objects are percentages of the canvas size.
"""

import logging
import os
import tomllib
from typing import Any, Optional, Union

from attrs import define, field
from attrs.validators import deep_iterable, instance_of, optional

from rasm.api.image import Image
from rasm.canvas import Canvas
from rasm.constants import DEFAULT_COLOR, ObjectKind
from rasm.errors import ConfigurationError, ManifestError
from rasm.formats import get_format
from rasm.validators import pair_of, range_

logger = logging.getLogger(__name__)

_color = deep_iterable(range_(0, 255), instance_of((list, tuple)))


def _tuple(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value


def _size(value: Any) -> tuple[int, ...]:
    return tuple(int(x) for x in value)


def _check_color(inst: Any, attr: Any, value: Any) -> None:
    if value is None:
        return
    _color(inst, attr, value)
    if len(value) != 4:
        raise ValueError("'%s' must have 4 channels, got %r" % (attr.name, value))


@define
class AssetInfo:
    """
    Named asset that objects may refer to.

    .. py:attribute:: id
    .. py:attribute:: src
    """

    id: str = field(validator=instance_of(str))
    src: str = field(validator=instance_of(str))


@define
class ObjectInfo:
    """
    One object of the manifest.

    .. py:attribute:: name

        Kind of the object, ``"rect"`` or ``"image"``.

    .. py:attribute:: origin

        (x, y) percentages of the top-left corner.

    .. py:attribute:: offset

        (x, y) percentages of the opposite end of a rectangle's diagonal.

    .. py:attribute:: resize

        (width, height) percentages of the canvas size. A zero keeps the
        aspect ratio of the image.
    """

    name: str = field(validator=instance_of(str))
    src: Optional[str] = field(default=None, validator=optional(instance_of(str)))
    asset: Optional[str] = field(default=None, validator=optional(instance_of(str)))
    color: Optional[tuple[int, ...]] = field(
        default=None, converter=_tuple, validator=_check_color
    )
    content: Optional[str] = field(
        default=None, validator=optional(instance_of(str))
    )
    resize: Optional[tuple[float, float]] = field(
        default=None, converter=_tuple, validator=pair_of(0, 100)
    )
    origin: Optional[tuple[float, float]] = field(
        default=None, converter=_tuple, validator=pair_of(0, 100)
    )
    offset: Optional[tuple[float, float]] = field(
        default=None, converter=_tuple, validator=pair_of(0, 100)
    )

    @property
    def kind(self) -> ObjectKind:
        """
        :raises ConfigurationError: if :py:attr:`name` is not a known kind.
        """
        try:
            return ObjectKind(self.name)
        except ValueError:
            raise ConfigurationError("Unknown object: %r" % (self.name,)) from None

    def require(self, *names: str) -> None:
        missing = [name for name in names if getattr(self, name) is None]
        if missing:
            raise ManifestError(
                "Object %r requires %s" % (self.name, ", ".join(missing))
            )


@define
class Manifest:
    """
    Parsed manifest.

    .. py:attribute:: format

        Output format tag, ``"png"`` or ``"jpg"``.

    .. py:attribute:: size

        (width, height) of the canvas in pixels.

    .. py:attribute:: color

        Background (r, g, b, a).
    """

    format: str = field(validator=instance_of(str))
    size: tuple[int, int] = field(converter=_size, validator=pair_of(1, 1 << 16))
    color: tuple[int, ...] = field(
        default=DEFAULT_COLOR, converter=_tuple, validator=_check_color
    )
    assets: list[AssetInfo] = field(factory=list)
    objects: list[ObjectInfo] = field(factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Manifest":
        """
        Build a manifest from parsed TOML data.

        :raises ManifestError: if a key is missing, unknown or invalid.
        """
        try:
            kwargs = dict(data)
            kwargs["assets"] = [AssetInfo(**x) for x in data.get("assets", [])]
            kwargs["objects"] = [ObjectInfo(**x) for x in data.get("objects", [])]
            return cls(**kwargs)
        except (TypeError, ValueError) as e:
            raise ManifestError("Invalid manifest: %s" % e) from e


def load(path: Union[str, "os.PathLike[str]"]) -> Manifest:
    """
    Read a TOML manifest.

    :raises ManifestError: if the file is not valid TOML or not a valid
        manifest.
    """
    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ManifestError("%s: %s" % (path, e)) from e
    logger.debug("Loaded manifest %s" % path)
    return Manifest.from_dict(data)


def build(
    manifest: Manifest, base_dir: Union[str, "os.PathLike[str]"] = "."
) -> Canvas:
    """
    Create a canvas and queue every object of ``manifest``.

    Object kinds and the output format are checked before anything is
    decoded or drawn.

    :param base_dir: Directory that image sources are relative to.
    """
    get_format(manifest.format)
    kinds = [info.kind for info in manifest.objects]

    width, height = manifest.size
    canvas = Canvas(manifest.format, width, height, manifest.color)
    for kind, info in zip(kinds, manifest.objects):
        if kind == ObjectKind.RECT:
            info.require("origin", "offset", "color")
            canvas.new_rect(info.origin, info.offset, info.color)
        elif kind == ObjectKind.IMAGE:
            info.require("src", "origin")
            image = Image.open(os.path.join(base_dir, info.src))
            placed = canvas.add_image(info.origin, image)
            if info.resize is not None:
                placed.resize(canvas.resolve(info.resize))
    return canvas


def render(
    manifest: Manifest,
    output: Union[str, "os.PathLike[str]"],
    base_dir: Union[str, "os.PathLike[str]"] = ".",
) -> str:
    """
    Render ``manifest`` to ``<output>.<ext>``.

    :return: Path of the written file.
    """
    return build(manifest, base_dir).save(output)
