"""Rendering conditions: sizes, device view configs, layouts and traits.

Sizes are logical points. The pixel size of a render is points multiplied by
the display scale.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union

from .color_scheme import ColorScheme
from .content_size import ContentSize, DynamicTypeSize


Idiom = Literal["phone", "pad"]
SizeClass = Literal["compact", "regular"]


@dataclass(frozen=True)
class Size:
    """Width and height in points."""

    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Size must be positive, got {self.width}x{self.height}")

    def scaled_height(self, multiplier: float) -> "Size":
        return Size(self.width, self.height * multiplier)


@dataclass(frozen=True)
class SafeArea:
    """Insets (points) the host keeps free of content."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class DeviceTraits:
    """Trait bundle a device imposes on the rendered view."""

    display_scale: float
    idiom: Idiom = "phone"
    horizontal_size_class: SizeClass = "compact"
    vertical_size_class: SizeClass = "regular"


@dataclass(frozen=True)
class ViewConfig:
    """Everything needed to lay a view out as if on a device.

    Attributes:
        safe_area: Safe area insets
        size: Screen size in points (None = size undefined, view decides)
        traits: Device trait bundle
    """

    safe_area: SafeArea
    size: Optional[Size]
    traits: DeviceTraits


@dataclass(frozen=True)
class DeviceLayout:
    """Lay out the view in a device's screen."""

    config: ViewConfig


@dataclass(frozen=True)
class FixedLayout:
    """Lay out the view in a fixed frame."""

    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Fixed layout must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class SizeThatFitsLayout:
    """Lay out the view at its own natural size."""


SIZE_THAT_FITS = SizeThatFitsLayout()

Layout = Union[DeviceLayout, FixedLayout, SizeThatFitsLayout]


@dataclass(frozen=True)
class Traits:
    """Full set of rendering conditions for one render request.

    Unset axes (None) leave the host default in place: large content size,
    unspecified color scheme and the layout's native display scale.
    """

    layout: Layout
    content_size: Optional[ContentSize] = None
    color_scheme: Optional[ColorScheme] = None
    display_scale: Optional[float] = None
    dynamic_type: Optional[DynamicTypeSize] = None
