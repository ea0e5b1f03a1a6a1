"""Root fixtures for all tests."""

import os

import pytest

from snapgrid.color_scheme import ColorScheme
from snapgrid.content_size import ContentSize
from snapgrid.device import CustomDevice
from snapgrid.gateway import Outcome
from snapgrid.policy import SnapshotPolicy
from snapgrid.traits import DeviceTraits, SafeArea, Size, ViewConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear snapshot env vars and reset config singleton before each test."""
    for key in list(os.environ.keys()):
        if key.startswith("SNAP_") or key == "UPDATE_SNAPSHOTS":
            monkeypatch.delenv(key, raising=False)

    # Reset config singleton
    import snapgrid.env

    snapgrid.env._config = None

    yield

    # Reset again after test
    snapgrid.env._config = None


class FakeRenderer:
    """Renderer that records calls instead of drawing."""

    def __init__(self):
        self.calls = []

    def render(self, view, traits):
        self.calls.append((view, traits))
        return ("image", len(self.calls))


class FakeStore:
    """Fixture store returning canned statuses per identifier (default: match)."""

    def __init__(self, statuses=None):
        self.statuses = statuses or {}
        self.calls = []

    def compare_or_record(self, image, identifier, record, precision, location):
        self.calls.append(
            {
                "image": image,
                "identifier": identifier,
                "record": record,
                "precision": precision,
                "location": location,
            }
        )
        status = "recorded" if record else self.statuses.get(identifier, "match")
        return Outcome(identifier=identifier, status=status, message=f"{identifier} {status}")

    @property
    def identifiers(self):
        return [call["identifier"] for call in self.calls]


def make_device(name: str, width: float = 100, height: float = 200) -> CustomDevice:
    """Custom device with a plain 1x config."""
    return CustomDevice(
        name=name,
        config=ViewConfig(SafeArea(), Size(width, height), DeviceTraits(display_scale=1.0)),
    )


@pytest.fixture
def device_a():
    return make_device("A")


@pytest.fixture
def device_b():
    return make_device("B", 120, 240)


@pytest.fixture
def two_scheme_policy(device_a, device_b):
    """Devices A and B, light and dark, large text only."""
    return SnapshotPolicy(
        devices=[device_a, device_b],
        record=False,
        display_scale=None,
        content_sizes=[ContentSize.LARGE],
        color_schemes=[ColorScheme.LIGHT, ColorScheme.DARK],
    )


@pytest.fixture
def one_scheme_policy(device_a, device_b):
    """Devices A and B, light only, large text only."""
    return SnapshotPolicy(
        devices=[device_a, device_b],
        record=False,
        display_scale=None,
        content_sizes=[ContentSize.LARGE],
        color_schemes=[ColorScheme.LIGHT],
    )


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def device_factory():
    """Build custom devices by name and size."""
    return make_device


@pytest.fixture
def fake_store_factory():
    """Build fake stores with canned statuses."""
    return FakeStore
