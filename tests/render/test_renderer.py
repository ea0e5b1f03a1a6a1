"""Tests for the matplotlib renderer."""

import matplotlib.pyplot as plt
import pytest

from snapgrid.color_scheme import ColorScheme
from snapgrid.content_size import ContentSize, DynamicTypeSize
from snapgrid.render import (
    DEFAULT_FIT_SIZE,
    VIEW_THEMES,
    Label,
    MatplotlibRenderer,
    decode_png,
)
from snapgrid.traits import SIZE_THAT_FITS, FixedLayout, Traits


def blank(ax, ctx):
    """View that draws nothing."""


class CapturingView:
    """View recording the context it was drawn with."""

    def __init__(self):
        self.contexts = []

    def draw(self, ax, ctx):
        self.contexts.append(ctx)


@pytest.fixture
def renderer():
    return MatplotlibRenderer()


def close_to(actual, expected, tolerance=1):
    return abs(actual - expected) <= tolerance


class TestOutput:
    """Tests for the rendered image."""

    def test_returns_png(self, renderer):
        image = renderer.render(blank, Traits(layout=FixedLayout(100, 50)))

        assert image.png.startswith(b"\x89PNG")
        assert image.pixels.shape[-1] == 4

    def test_pixels_match_png(self, renderer):
        image = renderer.render(blank, Traits(layout=FixedLayout(40, 30)))
        assert (decode_png(image.png) == image.pixels).all()

    def test_deterministic(self, renderer):
        traits = Traits(layout=FixedLayout(120, 80), color_scheme=ColorScheme.DARK)
        view = Label("Hello")

        assert renderer.render(view, traits).png == renderer.render(view, traits).png

    def test_figures_closed(self, renderer):
        renderer.render(blank, Traits(layout=FixedLayout(10, 10)))
        assert plt.get_fignums() == []

    def test_figures_closed_when_view_fails(self, renderer):
        def broken(ax, ctx):
            raise RuntimeError("view failed")

        with pytest.raises(RuntimeError, match="view failed"):
            renderer.render(broken, Traits(layout=FixedLayout(10, 10)))
        assert plt.get_fignums() == []


class TestSizing:
    """Canvas size and pixel density."""

    def test_fixed_layout_at_scale_one(self, renderer):
        image = renderer.render(blank, Traits(layout=FixedLayout(100, 50)))

        assert close_to(image.width, 100)
        assert close_to(image.height, 50)

    def test_display_scale_multiplies_pixels(self, renderer):
        image = renderer.render(
            blank, Traits(layout=FixedLayout(100, 50), display_scale=2.0)
        )

        assert close_to(image.width, 200)
        assert close_to(image.height, 100)

    def test_device_layout_uses_native_scale(self, renderer, device_factory):
        device = device_factory("Tiny", 60, 40)
        image = renderer.render(blank, Traits(layout=device.layout))

        assert close_to(image.width, 60)
        assert close_to(image.height, 40)

    def test_display_scale_overrides_device_scale(self, renderer, device_factory):
        device = device_factory("Tiny", 60, 40)
        image = renderer.render(blank, Traits(layout=device.layout, display_scale=2.0))

        assert close_to(image.width, 120)

    def test_size_that_fits_uses_view(self, renderer):
        small = renderer.render(
            Label("Text"), Traits(layout=SIZE_THAT_FITS, dynamic_type=DynamicTypeSize.SMALL)
        )
        huge = renderer.render(
            Label("Text"),
            Traits(layout=SIZE_THAT_FITS, dynamic_type=DynamicTypeSize.ACCESSIBILITY_5),
        )

        assert huge.width > small.width
        assert huge.height > small.height

    def test_size_that_fits_falls_back_to_proposal(self, renderer):
        image = renderer.render(blank, Traits(layout=SIZE_THAT_FITS))

        assert close_to(image.width, DEFAULT_FIT_SIZE.width)
        assert close_to(image.height, DEFAULT_FIT_SIZE.height)


class TestContext:
    """Context handed to views."""

    def test_font_scale_from_content_size(self, renderer):
        view = CapturingView()
        renderer.render(
            view,
            Traits(layout=FixedLayout(10, 10), content_size=ContentSize.ACCESSIBILITY_LARGE),
        )

        ctx = view.contexts[0]
        assert ctx.font_scale == ContentSize.ACCESSIBILITY_LARGE.font_scale
        assert ctx.font_size(17) == 33.0

    def test_dynamic_type_wins_over_content_size(self, renderer):
        view = CapturingView()
        renderer.render(
            view,
            Traits(
                layout=SIZE_THAT_FITS,
                content_size=ContentSize.SMALL,
                dynamic_type=DynamicTypeSize.XXX_LARGE,
            ),
        )

        assert view.contexts[0].font_scale == DynamicTypeSize.XXX_LARGE.font_scale

    def test_default_font_scale_is_large(self, renderer):
        view = CapturingView()
        renderer.render(view, Traits(layout=FixedLayout(10, 10)))

        assert view.contexts[0].font_scale == 1.0

    def test_device_safe_area(self, renderer):
        from snapgrid.device import Device

        view = CapturingView()
        renderer.render(view, Traits(layout=Device.IPHONE_X.layout, display_scale=0.25))

        ctx = view.contexts[0]
        assert ctx.safe_area.top == 44
        assert (ctx.width, ctx.height) == (375, 812)

    @pytest.mark.parametrize(
        "scheme,expected",
        [
            (ColorScheme.LIGHT, "light"),
            (ColorScheme.DARK, "dark"),
            (ColorScheme.UNSPECIFIED, "light"),
            (None, "light"),
        ],
    )
    def test_theme(self, renderer, scheme, expected):
        view = CapturingView()
        renderer.render(view, Traits(layout=FixedLayout(10, 10), color_scheme=scheme))

        assert view.contexts[0].theme.name == expected

    def test_background_painted(self, renderer):
        light = renderer.render(
            blank, Traits(layout=FixedLayout(20, 20), color_scheme=ColorScheme.LIGHT)
        )
        dark = renderer.render(
            blank, Traits(layout=FixedLayout(20, 20), color_scheme=ColorScheme.DARK)
        )

        assert VIEW_THEMES[ColorScheme.LIGHT].background == "ffffff"
        assert list(light.pixels[5, 5]) == [1.0, 1.0, 1.0, 1.0]
        assert list(dark.pixels[5, 5]) == [0.0, 0.0, 0.0, 1.0]
