"""Expand a snapshot call into the ordered list of renders to compare.

Color scheme and content size sweeps are additive, never cross-multiplied:
a device with C schemes and S sizes yields C + S renders, not C * S. The
scheme sweep only runs when more than one scheme is configured.
"""

from dataclasses import dataclass
from typing import Any, Literal, Optional

from .resolve import EffectiveConfig
from .traits import SIZE_THAT_FITS, Layout, Traits
from . import log


EntryKind = Literal["layout", "component", "devices", "device"]

IDENTIFIER_SEPARATOR = "_"


@dataclass(frozen=True)
class RenderRequest:
    """One render-and-compare step of a snapshot call."""

    view: Any
    traits: Traits
    identifier: str


def make_identifier(*fragments: Optional[str]) -> str:
    """Join non-empty name fragments into a fixture identifier.

    >>> make_identifier("iP8", "dark")
    'iP8_dark'
    >>> make_identifier("", "sizeL")
    'sizeL'
    """
    return IDENTIFIER_SEPARATOR.join(f for f in fragments if f)


def _color_scheme_sweep(
    view: Any,
    config: EffectiveConfig,
    layout: Layout,
    device_fragment: str = "",
) -> list[RenderRequest]:
    return [
        RenderRequest(
            view=view,
            traits=Traits(
                layout=layout,
                color_scheme=scheme,
                display_scale=config.display_scale,
            ),
            identifier=make_identifier(
                device_fragment, scheme.fragment, config.name_addition
            ),
        )
        for scheme in config.color_schemes
    ]


def _content_size_sweep(
    view: Any,
    config: EffectiveConfig,
    layout: Layout,
    device_fragment: str = "",
) -> list[RenderRequest]:
    return [
        RenderRequest(
            view=view,
            traits=Traits(
                layout=layout,
                content_size=size,
                display_scale=config.display_scale,
            ),
            identifier=make_identifier(
                device_fragment, size.fragment, config.name_addition
            ),
        )
        for size in config.content_sizes
    ]


def _sweep_layout(
    view: Any,
    config: EffectiveConfig,
    layout: Layout,
    device_fragment: str = "",
) -> list[RenderRequest]:
    requests = []
    # A single scheme would only duplicate the size sweep defaults
    if len(config.color_schemes) > 1:
        requests.extend(_color_scheme_sweep(view, config, layout, device_fragment))
    requests.extend(_content_size_sweep(view, config, layout, device_fragment))
    return requests


def expand_layout(view: Any, config: EffectiveConfig, layout: Layout) -> list[RenderRequest]:
    """Requests for a view rendered in one explicit layout, no device axis."""
    return _dedupe(_sweep_layout(view, config, layout))


def expand_component(view: Any, config: EffectiveConfig) -> list[RenderRequest]:
    """Requests for a component rendered at its natural size.

    Content sizes are applied as framework-native dynamic type sizes on the
    view itself. There is no device or color scheme axis.
    """
    requests = [
        RenderRequest(
            view=view,
            traits=Traits(
                layout=SIZE_THAT_FITS,
                display_scale=config.display_scale,
                dynamic_type=size.dynamic_type,
            ),
            identifier=make_identifier(size.fragment, config.name_addition),
        )
        for size in config.content_sizes
    ]
    return _dedupe(requests)


def expand_devices(view: Any, config: EffectiveConfig) -> list[RenderRequest]:
    """Requests for every device of the config, in order."""
    requests = []
    for device in config.devices:
        requests.extend(_sweep_layout(view, config, device.layout, device.fragment))
    return _dedupe(requests)


def expand(
    view: Any,
    config: EffectiveConfig,
    kind: EntryKind,
    layout: Optional[Layout] = None,
) -> list[RenderRequest]:
    """Expand a call of the given entry kind.

    Args:
        view: View under test
        config: Resolved call configuration
        kind: Entry operation that was called
        layout: Explicit layout, required for the "layout" kind

    Returns:
        Render requests in rendering order, identifiers unique
    """
    if kind == "layout":
        if layout is None:
            raise ValueError("layout entry requires a layout")
        return expand_layout(view, config, layout)
    if kind == "component":
        return expand_component(view, config)
    # "device" configs already hold the single override device
    return expand_devices(view, config)


def _dedupe(requests: list[RenderRequest]) -> list[RenderRequest]:
    """Drop requests whose identifier was already produced earlier."""
    seen: set[str] = set()
    unique = []
    for request in requests:
        if request.identifier in seen:
            log.warn(
                f"Duplicate snapshot identifier '{request.identifier}', "
                f"skipping the repeated render"
            )
            continue
        seen.add(request.identifier)
        unique.append(request)
    return unique
