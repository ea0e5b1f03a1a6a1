"""Library-wide snapshot defaults."""

from dataclasses import dataclass
from typing import Optional

from .color_scheme import ColorScheme
from .content_size import ContentSize
from .device import SnapshotDevice
from . import log


@dataclass(frozen=True)
class SnapshotPolicy:
    """Default devices, record mode and axes shared by every snapshot call.

    Create one per test suite, typically in a shared testing module:

        POLICY = SnapshotPolicy(
            devices=[Device.IPHONE_8, Device.IPHONE_13_PRO_MAX, Device.IPAD_PRO_11],
            record=False,
            display_scale=1,
            content_sizes=[ContentSize.EXTRA_EXTRA_EXTRA_LARGE, ContentSize.LARGE],
            color_schemes=[ColorScheme.LIGHT, ColorScheme.DARK],
        )

    Attributes:
        devices: Devices to render on, in rendering order
        record: Whether calls record new fixtures instead of comparing
        display_scale: Pixel density override (None = device native scale)
        content_sizes: Content size sweep, in rendering order
        color_schemes: Color scheme sweep, in rendering order
    """

    devices: tuple[SnapshotDevice, ...]
    record: bool
    display_scale: Optional[float]
    content_sizes: tuple[ContentSize, ...]
    color_schemes: tuple[ColorScheme, ...]

    def __post_init__(self):
        if self.display_scale is not None and self.display_scale <= 0:
            raise ValueError(f"display_scale must be positive, got {self.display_scale}")

        # Accept any iterable, store tuples so the policy stays immutable
        object.__setattr__(self, "record", bool(self.record))
        for axis in ("devices", "content_sizes", "color_schemes"):
            values = tuple(getattr(self, axis))
            object.__setattr__(self, axis, values)
            if not values:
                log.warn(f"Snapshot policy has no {axis}, calls will render nothing on that axis")
