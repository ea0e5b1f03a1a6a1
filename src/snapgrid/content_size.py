"""Content size categories (text scaling levels) used as a snapshot axis."""

from enum import Enum, unique


@unique
class DynamicTypeSize(Enum):
    """Framework-native dynamic type sizes used when snapshotting components."""

    X_SMALL = "xSmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    X_LARGE = "xLarge"
    XX_LARGE = "xxLarge"
    XXX_LARGE = "xxxLarge"
    ACCESSIBILITY_1 = "accessibility1"
    ACCESSIBILITY_2 = "accessibility2"
    ACCESSIBILITY_3 = "accessibility3"
    ACCESSIBILITY_4 = "accessibility4"
    ACCESSIBILITY_5 = "accessibility5"

    @property
    def font_scale(self) -> float:
        """Body font size relative to the default (large) size."""
        return _DYNAMIC_BODY_POINTS[self] / _DEFAULT_BODY_POINTS


@unique
class ContentSize(Enum):
    """Preferred content size category.

    The value is the name fragment written into fixture identifiers. Released
    values must never change or every recorded fixture for them is orphaned.
    """

    UNSPECIFIED = "unspecified"
    EXTRA_SMALL = "sizeXS"
    SMALL = "sizeS"
    MEDIUM = "sizeM"
    LARGE = "sizeL"
    EXTRA_LARGE = "sizeXL"
    EXTRA_EXTRA_LARGE = "sizeXXL"
    EXTRA_EXTRA_EXTRA_LARGE = "sizeXXXL"
    ACCESSIBILITY_MEDIUM = "a11ySizeM"
    ACCESSIBILITY_LARGE = "a11ySizeL"
    ACCESSIBILITY_EXTRA_LARGE = "a11ySizeXL"
    ACCESSIBILITY_EXTRA_EXTRA_LARGE = "a11ySizeXXL"
    ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE = "a11ySizeXXXL"

    @property
    def fragment(self) -> str:
        return self.value

    @property
    def category(self) -> str:
        """Host trait value for the preferred content size category."""
        return _CATEGORIES[self]

    @property
    def dynamic_type(self) -> DynamicTypeSize:
        return _DYNAMIC_TYPES[self]

    @property
    def font_scale(self) -> float:
        return _CONTENT_BODY_POINTS[self] / _DEFAULT_BODY_POINTS

    @property
    def is_accessibility(self) -> bool:
        return self.value.startswith("a11y")


_DEFAULT_BODY_POINTS = 17.0

# Body text point sizes per category (system font, large = 17pt)
_DYNAMIC_BODY_POINTS = {
    DynamicTypeSize.X_SMALL: 14.0,
    DynamicTypeSize.SMALL: 15.0,
    DynamicTypeSize.MEDIUM: 16.0,
    DynamicTypeSize.LARGE: 17.0,
    DynamicTypeSize.X_LARGE: 19.0,
    DynamicTypeSize.XX_LARGE: 21.0,
    DynamicTypeSize.XXX_LARGE: 23.0,
    DynamicTypeSize.ACCESSIBILITY_1: 28.0,
    DynamicTypeSize.ACCESSIBILITY_2: 33.0,
    DynamicTypeSize.ACCESSIBILITY_3: 40.0,
    DynamicTypeSize.ACCESSIBILITY_4: 47.0,
    DynamicTypeSize.ACCESSIBILITY_5: 53.0,
}

_CATEGORIES = {
    ContentSize.UNSPECIFIED: "unspecified",
    ContentSize.EXTRA_SMALL: "extraSmall",
    ContentSize.SMALL: "small",
    ContentSize.MEDIUM: "medium",
    ContentSize.LARGE: "large",
    ContentSize.EXTRA_LARGE: "extraLarge",
    ContentSize.EXTRA_EXTRA_LARGE: "extraExtraLarge",
    ContentSize.EXTRA_EXTRA_EXTRA_LARGE: "extraExtraExtraLarge",
    ContentSize.ACCESSIBILITY_MEDIUM: "accessibilityMedium",
    ContentSize.ACCESSIBILITY_LARGE: "accessibilityLarge",
    ContentSize.ACCESSIBILITY_EXTRA_LARGE: "accessibilityExtraLarge",
    ContentSize.ACCESSIBILITY_EXTRA_EXTRA_LARGE: "accessibilityExtraExtraLarge",
    ContentSize.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE: "accessibilityExtraExtraExtraLarge",
}

# extraSmall has no smaller dynamic type counterpart in the component path,
# unspecified falls back to medium
_DYNAMIC_TYPES = {
    ContentSize.UNSPECIFIED: DynamicTypeSize.MEDIUM,
    ContentSize.EXTRA_SMALL: DynamicTypeSize.SMALL,
    ContentSize.SMALL: DynamicTypeSize.SMALL,
    ContentSize.MEDIUM: DynamicTypeSize.MEDIUM,
    ContentSize.LARGE: DynamicTypeSize.LARGE,
    ContentSize.EXTRA_LARGE: DynamicTypeSize.X_LARGE,
    ContentSize.EXTRA_EXTRA_LARGE: DynamicTypeSize.XX_LARGE,
    ContentSize.EXTRA_EXTRA_EXTRA_LARGE: DynamicTypeSize.XXX_LARGE,
    ContentSize.ACCESSIBILITY_MEDIUM: DynamicTypeSize.ACCESSIBILITY_1,
    ContentSize.ACCESSIBILITY_LARGE: DynamicTypeSize.ACCESSIBILITY_2,
    ContentSize.ACCESSIBILITY_EXTRA_LARGE: DynamicTypeSize.ACCESSIBILITY_3,
    ContentSize.ACCESSIBILITY_EXTRA_EXTRA_LARGE: DynamicTypeSize.ACCESSIBILITY_4,
    ContentSize.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE: DynamicTypeSize.ACCESSIBILITY_5,
}

_CONTENT_BODY_POINTS = {
    ContentSize.UNSPECIFIED: _DEFAULT_BODY_POINTS,
    ContentSize.EXTRA_SMALL: 14.0,
    ContentSize.SMALL: 15.0,
    ContentSize.MEDIUM: 16.0,
    ContentSize.LARGE: 17.0,
    ContentSize.EXTRA_LARGE: 19.0,
    ContentSize.EXTRA_EXTRA_LARGE: 21.0,
    ContentSize.EXTRA_EXTRA_EXTRA_LARGE: 23.0,
    ContentSize.ACCESSIBILITY_MEDIUM: 28.0,
    ContentSize.ACCESSIBILITY_LARGE: 33.0,
    ContentSize.ACCESSIBILITY_EXTRA_LARGE: 40.0,
    ContentSize.ACCESSIBILITY_EXTRA_EXTRA_LARGE: 47.0,
    ContentSize.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE: 53.0,
}

# Ordered smallest to largest, excluding unspecified
ALL_CONTENT_SIZES = tuple(s for s in ContentSize if s is not ContentSize.UNSPECIFIED)
