"""Device catalog used as the device snapshot axis."""

from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional, Union

from .traits import DeviceLayout, DeviceTraits, SafeArea, Size, ViewConfig
from . import log


@unique
class Device(Enum):
    """Catalog device; the value is the fixture name fragment."""

    IPHONE_8 = "iP8"
    IPHONE_8_PLUS = "iP8Plus"
    IPHONE_X = "iPX"
    IPHONE_XS_MAX = "iPXsMax"
    IPHONE_12 = "iP12"
    IPHONE_12_PRO = "iP12Pro"
    IPHONE_12_PRO_MAX = "iP12ProMax"
    IPHONE_13_MINI = "iP13Mini"
    IPHONE_13 = "iP13"
    IPHONE_13_PRO = "iP13Pro"
    IPHONE_13_PRO_MAX = "iP13ProMax"
    IPAD_MINI = "iPadMini"
    IPAD_PRO_10_5 = "iPadPro10_5"
    IPAD_PRO_11 = "iPadPro11"
    IPAD_PRO_12_9 = "iPadPro12_9"

    @property
    def fragment(self) -> str:
        return self.value

    @property
    def config(self) -> ViewConfig:
        return DEVICE_CONFIGS[self]

    @property
    def layout(self) -> DeviceLayout:
        return DeviceLayout(self.config)


@dataclass(frozen=True)
class CustomDevice:
    """A device outside the catalog, described by an explicit view config.

    Attributes:
        name: Fixture name fragment
        config: Safe area, size and traits to render with
    """

    name: str
    config: ViewConfig

    @property
    def fragment(self) -> str:
        return self.name

    @property
    def layout(self) -> DeviceLayout:
        return DeviceLayout(self.config)


SnapshotDevice = Union[Device, CustomDevice]


_PHONE_2X = DeviceTraits(display_scale=2.0)
_PHONE_3X = DeviceTraits(display_scale=3.0)
_PAD_2X = DeviceTraits(
    display_scale=2.0,
    idiom="pad",
    horizontal_size_class="regular",
    vertical_size_class="regular",
)

# Portrait configurations
DEVICE_CONFIGS: dict[Device, ViewConfig] = {
    Device.IPHONE_8: ViewConfig(SafeArea(top=20), Size(375, 667), _PHONE_2X),
    Device.IPHONE_8_PLUS: ViewConfig(SafeArea(top=20), Size(414, 736), _PHONE_3X),
    Device.IPHONE_X: ViewConfig(SafeArea(top=44, bottom=34), Size(375, 812), _PHONE_3X),
    Device.IPHONE_XS_MAX: ViewConfig(SafeArea(top=44, bottom=34), Size(414, 896), _PHONE_3X),
    Device.IPHONE_12: ViewConfig(SafeArea(top=47, bottom=34), Size(390, 844), _PHONE_3X),
    Device.IPHONE_12_PRO: ViewConfig(SafeArea(top=47, bottom=34), Size(390, 844), _PHONE_3X),
    Device.IPHONE_12_PRO_MAX: ViewConfig(SafeArea(top=47, bottom=34), Size(428, 926), _PHONE_3X),
    Device.IPHONE_13_MINI: ViewConfig(SafeArea(top=50, bottom=34), Size(375, 812), _PHONE_3X),
    Device.IPHONE_13: ViewConfig(SafeArea(top=47, bottom=34), Size(390, 844), _PHONE_3X),
    Device.IPHONE_13_PRO: ViewConfig(SafeArea(top=47, bottom=34), Size(390, 844), _PHONE_3X),
    Device.IPHONE_13_PRO_MAX: ViewConfig(SafeArea(top=47, bottom=34), Size(428, 926), _PHONE_3X),
    Device.IPAD_MINI: ViewConfig(SafeArea(top=20), Size(768, 1024), _PAD_2X),
    Device.IPAD_PRO_10_5: ViewConfig(SafeArea(top=20), Size(834, 1112), _PAD_2X),
    Device.IPAD_PRO_11: ViewConfig(SafeArea(top=24, bottom=20), Size(834, 1194), _PAD_2X),
    Device.IPAD_PRO_12_9: ViewConfig(SafeArea(top=24, bottom=20), Size(1024, 1366), _PAD_2X),
}


def long_device(
    height_multiplier: Optional[float],
    base: SnapshotDevice = Device.IPHONE_13_PRO_MAX,
) -> SnapshotDevice:
    """Build a taller variant of a device for snapshotting scrolling content.

    Args:
        height_multiplier: Factor applied to the base device's height
        base: Device whose size, safe area and traits are reused

    Returns:
        CustomDevice named ``<base fragment>Long``, or the unmodified base
        device when there is no multiplier or the base has no defined size
    """
    if height_multiplier is None:
        return base

    size = base.config.size
    if size is None:
        log.warn(
            f"Device {base.fragment} has no defined size, "
            f"using it unmodified instead of a long variant"
        )
        return base

    return CustomDevice(
        name=f"{base.fragment}Long",
        config=ViewConfig(
            safe_area=base.config.safe_area,
            size=size.scaled_height(height_multiplier),
            traits=base.config.traits,
        ),
    )
