"""PNG fixture storage and pixel comparison.

Fixtures live at ``<root>/<test file stem>/<test name>.<identifier>.png``.
The root defaults to a ``__snapshots__`` directory next to the test file.

To re-record every fixture, run: UPDATE_SNAPSHOTS=1 pytest
"""

import re
from pathlib import Path
from typing import Any, Optional

import matplotlib.image as mpimg

from .env import get_config
from .gateway import Outcome, SourceLocation
from .render import RenderedImage, decode_png
from . import log


SNAPSHOTS_DIRNAME = "__snapshots__"


def sanitize_name(name: str) -> str:
    """Make a test name safe to use in a file name."""
    return re.sub(r"\W+", "-", name).strip("-") or "snapshot"


def match_ratio(reference: Any, actual: Any) -> float:
    """Fraction of pixels that are identical in both images (0 if sizes differ)."""
    if reference.shape != actual.shape:
        return 0.0
    if reference.ndim == 2:
        return float((reference == actual).mean())
    return float((reference == actual).all(axis=-1).mean())


class FileFixtureStore:
    """Compare renders against PNG fixtures on disk, or record them."""

    def __init__(
        self,
        root: Optional[Path] = None,
        failure_dir: Optional[Path] = None,
        force_record: Optional[bool] = None,
    ):
        cfg = get_config()
        self.root = root or cfg.fixture_dir
        self.failure_dir = failure_dir or cfg.failure_dir
        self.force_record = cfg.update_snapshots if force_record is None else force_record

    def fixture_path(self, identifier: str, location: SourceLocation) -> Path:
        test_file = Path(location.file)
        root = self.root or test_file.parent / SNAPSHOTS_DIRNAME
        return root / test_file.stem / f"{sanitize_name(location.test_name)}.{identifier}.png"

    def compare_or_record(
        self,
        image: RenderedImage,
        identifier: str,
        record: bool,
        precision: float,
        location: SourceLocation,
    ) -> Outcome:
        """Compare a render with its fixture, or write the fixture.

        Args:
            image: Rendered image to check
            identifier: Fixture identifier within the test
            record: Write the fixture instead of comparing
            precision: Minimum fraction of matching pixels
            location: Calling test, scopes the fixture path

        Returns:
            Outcome of the comparison
        """
        path = self.fixture_path(identifier, location)

        if record or self.force_record:
            _write(path, image.png)
            log.info(f"Snapshot recorded: {path}")
            return Outcome(
                identifier=identifier,
                status="recorded",
                message=(
                    f"Record mode is on. Snapshot recorded: {path}\n"
                    f"Turn record mode off and re-run to compare against it."
                ),
                reference_path=path,
            )

        if not path.exists():
            _write(path, image.png)
            log.info(f"Snapshot created: {path}")
            return Outcome(
                identifier=identifier,
                status="recorded",
                message=(
                    f"No reference was found on disk. Snapshot created: {path}\n"
                    f"Re-run to compare against it."
                ),
                reference_path=path,
            )

        reference_png = path.read_bytes()
        if reference_png == image.png:
            return Outcome(identifier=identifier, status="match", reference_path=path)

        reference = decode_png(reference_png)
        if reference.shape != image.pixels.shape:
            detail = (
                f"Image size {image.width}x{image.height} differs from "
                f"reference {reference.shape[1]}x{reference.shape[0]}"
            )
        else:
            ratio = match_ratio(reference, image.pixels)
            if ratio >= precision:
                log.debug(f"{identifier}: {ratio:.4%} of pixels match, within precision")
                return Outcome(identifier=identifier, status="match", reference_path=path)
            detail = f"{ratio:.2%} of pixels match, {precision:.2%} required"

        failure_path = self._write_failure(path, image, reference)
        return Outcome(
            identifier=identifier,
            status="mismatch",
            message=(
                f"Snapshot does not match reference: {path}\n"
                f"{detail}\n"
                f"Failing render: {failure_path}"
            ),
            reference_path=path,
            failure_path=failure_path,
        )

    def _write_failure(self, path: Path, image: RenderedImage, reference: Any) -> Path:
        """Write the failing render and, when sizes agree, a difference image."""
        failure_path = self.failure_dir / path.parent.name / path.name
        _write(failure_path, image.png)

        if reference.shape == image.pixels.shape and reference.ndim == 3:
            diff = abs(reference - image.pixels)
            if diff.shape[-1] == 4:
                diff[..., 3] = 1.0
            diff_path = failure_path.with_name(f"{failure_path.stem}.diff.png")
            mpimg.imsave(diff_path, diff)

        log.warn(f"Snapshot mismatch, failing render written to {failure_path}")
        return failure_path


def _write(path: Path, png: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(png)
