"""Light/dark appearance modes used as a snapshot axis."""

from enum import Enum, unique


@unique
class ColorScheme(Enum):
    """Color scheme; the value is the fixture name fragment."""

    LIGHT = "light"
    DARK = "dark"
    UNSPECIFIED = "unspecified"

    @property
    def fragment(self) -> str:
        return self.value

    @property
    def interface_style(self) -> str:
        """Host trait value for the user interface style."""
        return self.value
