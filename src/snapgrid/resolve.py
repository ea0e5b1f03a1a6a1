"""Merge per-call overrides with the policy defaults."""

from dataclasses import dataclass
from typing import Optional

from .color_scheme import ColorScheme
from .content_size import ContentSize
from .device import SnapshotDevice, long_device
from .policy import SnapshotPolicy
from . import log


@dataclass(frozen=True)
class CallOverrides:
    """Optional per-call settings. Every field falls back to a default.

    Attributes:
        record: Record instead of compare (None = policy.record)
        test_dynamic_size: Sweep the policy content sizes (False = large only)
        device: Render on this device only (None = policy devices)
        scroll_view_multiplier: Append a long device whose height is
            multiplied by this factor (None = no extra device). Ignored when
            ``device`` is set.
        wait: Seconds to wait before capturing each render
        precision: Fraction of pixels that must match (1.0 = all)
        name_addition: Extra fragment appended to every identifier
    """

    record: Optional[bool] = None
    test_dynamic_size: bool = True
    device: Optional[SnapshotDevice] = None
    scroll_view_multiplier: Optional[float] = None
    wait: float = 0.0
    precision: float = 1.0
    name_addition: Optional[str] = None

    def __post_init__(self):
        if self.wait < 0:
            raise ValueError(f"wait must not be negative, got {self.wait}")
        if not 0.0 <= self.precision <= 1.0:
            raise ValueError(f"precision must be between 0 and 1, got {self.precision}")
        if self.scroll_view_multiplier is not None and self.scroll_view_multiplier <= 0:
            raise ValueError(
                f"scroll_view_multiplier must be positive, got {self.scroll_view_multiplier}"
            )


@dataclass(frozen=True)
class EffectiveConfig:
    """Configuration for a single snapshot call, built by resolve()."""

    devices: tuple[SnapshotDevice, ...]
    record: bool
    display_scale: Optional[float]
    content_sizes: tuple[ContentSize, ...]
    color_schemes: tuple[ColorScheme, ...]
    wait: float = 0.0
    precision: float = 1.0
    name_addition: Optional[str] = None


def resolve(
    policy: SnapshotPolicy,
    overrides: Optional[CallOverrides] = None,
) -> EffectiveConfig:
    """Build the effective configuration of one call.

    Args:
        policy: Library-wide defaults
        overrides: Per-call overrides (None = no overrides)

    Returns:
        EffectiveConfig with every field resolved
    """
    if overrides is None:
        overrides = CallOverrides()

    record = policy.record if overrides.record is None else overrides.record

    if overrides.test_dynamic_size:
        content_sizes = policy.content_sizes
    else:
        content_sizes = (ContentSize.LARGE,)

    if overrides.device is not None:
        devices: tuple[SnapshotDevice, ...] = (overrides.device,)
        if overrides.scroll_view_multiplier is not None:
            log.debug("scroll_view_multiplier ignored for a single-device call")
    elif overrides.scroll_view_multiplier is not None:
        devices = policy.devices + (long_device(overrides.scroll_view_multiplier),)
    else:
        devices = policy.devices

    return EffectiveConfig(
        devices=devices,
        record=record,
        display_scale=policy.display_scale,
        content_sizes=content_sizes,
        color_schemes=policy.color_schemes,
        wait=overrides.wait,
        precision=overrides.precision,
        name_addition=overrides.name_addition,
    )
