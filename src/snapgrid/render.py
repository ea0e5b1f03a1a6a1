"""Matplotlib-based view renderer.

A view is any object with a ``draw(ax, ctx)`` method (or a plain callable
taking the same arguments). It draws into an axes spanning the whole canvas,
in points, with the origin at the top-left corner. Views that should size
themselves for the component entry also implement ``size_that_fits(ctx)``.
"""

import io
from dataclasses import dataclass, replace
from typing import Any

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend, renders must not touch a display
import matplotlib.image as mpimg
import matplotlib.pyplot as plt

from .color_scheme import ColorScheme
from .content_size import ContentSize
from .traits import DeviceLayout, FixedLayout, SafeArea, Size, Traits
from . import log


POINTS_PER_INCH = 72

# Proposed size when a view cannot tell its natural size
DEFAULT_FIT_SIZE = Size(375, 100)


@dataclass(frozen=True)
class ViewTheme:
    """Color palette handed to views (hex values without #)."""

    name: str
    background: str
    surface: str
    text: str
    secondary: str
    separator: str
    accent: str


VIEW_THEMES: dict[ColorScheme, ViewTheme] = {
    ColorScheme.LIGHT: ViewTheme(
        name="light",
        background="ffffff",
        surface="f2f2f7",
        text="000000",
        secondary="3c3c43",
        separator="c6c6c8",
        accent="007aff",
    ),
    ColorScheme.DARK: ViewTheme(
        name="dark",
        background="000000",
        surface="1c1c1e",
        text="ffffff",
        secondary="ebebf5",
        separator="38383a",
        accent="0a84ff",
    ),
}


@dataclass(frozen=True)
class RenderContext:
    """Resolved environment a view draws in."""

    width: float
    height: float
    safe_area: SafeArea
    theme: ViewTheme
    font_scale: float
    display_scale: float
    traits: Traits

    def font_size(self, base: float = 17.0) -> float:
        """Scale a base point size by the content size in effect."""
        return base * self.font_scale

    def color(self, role: str) -> str:
        return f"#{getattr(self.theme, role)}"


@dataclass(frozen=True)
class RenderedImage:
    """PNG bytes of a render plus their decoded RGBA pixels."""

    png: bytes
    pixels: Any

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]


@dataclass(frozen=True)
class Label:
    """Plain text view, mostly useful for smoke tests."""

    text: str
    base_font_size: float = 17.0
    padding: float = 8.0

    def size_that_fits(self, ctx: RenderContext) -> Size:
        font_size = ctx.font_size(self.base_font_size)
        lines = self.text.splitlines() or [""]
        longest = max(len(line) for line in lines)
        return Size(
            max(longest, 1) * font_size * 0.6 + 2 * self.padding,
            len(lines) * font_size * 1.3 + 2 * self.padding,
        )

    def draw(self, ax, ctx: RenderContext) -> None:
        ax.text(
            self.padding, ctx.safe_area.top + self.padding, self.text,
            fontsize=ctx.font_size(self.base_font_size),
            color=ctx.color("text"),
            ha='left', va='top',
        )


def decode_png(png: bytes) -> Any:
    """Decode PNG bytes to a float RGBA array."""
    return mpimg.imread(io.BytesIO(png), format="png")


class MatplotlibRenderer:
    """Render views to PNG with the Agg backend."""

    def __init__(self, fit_proposal: Size = DEFAULT_FIT_SIZE):
        self.fit_proposal = fit_proposal

    def render(self, view: Any, traits: Traits) -> RenderedImage:
        """Render a view under the given traits.

        Args:
            view: Object with draw(ax, ctx), or a callable(ax, ctx)
            traits: Rendering conditions

        Returns:
            RenderedImage at points * display scale pixels
        """
        ctx = RenderContext(
            width=self.fit_proposal.width,
            height=self.fit_proposal.height,
            safe_area=SafeArea(),
            theme=_theme_for(traits.color_scheme),
            font_scale=_font_scale(traits),
            display_scale=_display_scale(traits),
            traits=traits,
        )
        size, safe_area = self._canvas(view, ctx)
        ctx = replace(ctx, width=size.width, height=size.height, safe_area=safe_area)

        log.debug(
            f"Rendering {size.width:g}x{size.height:g}pt @{ctx.display_scale:g}x "
            f"theme={ctx.theme.name} font_scale={ctx.font_scale:.3f}"
        )

        fig = plt.figure(
            figsize=(size.width / POINTS_PER_INCH, size.height / POINTS_PER_INCH),
            dpi=POINTS_PER_INCH,
        )
        try:
            fig.patch.set_facecolor(ctx.color("background"))
            ax = fig.add_axes((0, 0, 1, 1))
            ax.set_axis_off()
            ax.set_xlim(0, size.width)
            ax.set_ylim(size.height, 0)

            draw = getattr(view, "draw", view)
            draw(ax, ctx)

            buffer = io.BytesIO()
            fig.savefig(
                buffer,
                format="png",
                dpi=POINTS_PER_INCH * ctx.display_scale,
                facecolor=fig.get_facecolor(),
                metadata={"Software": None},
            )
        finally:
            # Ensure figure is closed to prevent memory leaks
            plt.close(fig)

        png = buffer.getvalue()
        return RenderedImage(png=png, pixels=decode_png(png))

    def _canvas(self, view: Any, ctx: RenderContext) -> tuple[Size, SafeArea]:
        layout = ctx.traits.layout
        if isinstance(layout, DeviceLayout):
            size = layout.config.size or self._size_that_fits(view, ctx)
            return size, layout.config.safe_area
        if isinstance(layout, FixedLayout):
            return Size(layout.width, layout.height), SafeArea()
        return self._size_that_fits(view, ctx), SafeArea()

    def _size_that_fits(self, view: Any, ctx: RenderContext) -> Size:
        size_that_fits = getattr(view, "size_that_fits", None)
        if size_that_fits is None:
            return self.fit_proposal
        return size_that_fits(ctx)


def _theme_for(scheme) -> ViewTheme:
    # Unspecified follows the host default, which is light
    return VIEW_THEMES.get(scheme, VIEW_THEMES[ColorScheme.LIGHT])


def _font_scale(traits: Traits) -> float:
    if traits.dynamic_type is not None:
        return traits.dynamic_type.font_scale
    return (traits.content_size or ContentSize.LARGE).font_scale


def _display_scale(traits: Traits) -> float:
    if traits.display_scale is not None:
        return traits.display_scale
    if isinstance(traits.layout, DeviceLayout):
        return traits.layout.config.traits.display_scale
    return 1.0
