"""Capabilities the snapshot runner needs from a renderer and a fixture store."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, Protocol

from .traits import Traits


OutcomeStatus = Literal["match", "mismatch", "recorded"]


@dataclass(frozen=True)
class SourceLocation:
    """Where a snapshot call was made, for fixture naming and failure reports."""

    file: str
    line: int
    test_name: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line} ({self.test_name})"


@dataclass(frozen=True)
class Outcome:
    """Result of comparing (or recording) one rendered image.

    Attributes:
        identifier: Fixture identifier within the test
        status: "match", "mismatch" or "recorded"
        message: Human readable detail for failures and recordings
        reference_path: Where the fixture lives, if the store has files
        failure_path: Where the failing render was written, if any
    """

    identifier: str
    status: OutcomeStatus
    message: str = ""
    reference_path: Optional[Path] = None
    failure_path: Optional[Path] = None

    @property
    def failed(self) -> bool:
        """Anything but a match fails the test, including recordings."""
        return self.status != "match"


class Renderer(Protocol):
    def render(self, view: Any, traits: Traits) -> Any:
        """Render a view under the given traits to an image."""
        ...


class FixtureStore(Protocol):
    def compare_or_record(
        self,
        image: Any,
        identifier: str,
        record: bool,
        precision: float,
        location: SourceLocation,
    ) -> Outcome:
        """Compare an image with its fixture, or write it when recording."""
        ...
