"""Snapshot entry points applying a shared policy to every call.

Create one instance in a shared testing module:

    assert_snapshot = SnapshotTest(
        SnapshotPolicy(
            devices=[Device.IPHONE_8, Device.IPHONE_13_PRO_MAX, Device.IPAD_PRO_11],
            record=False,
            display_scale=1,
            content_sizes=[ContentSize.EXTRA_EXTRA_EXTRA_LARGE, ContentSize.LARGE],
            color_schemes=[ColorScheme.LIGHT, ColorScheme.DARK],
        )
    )

Then assert snapshots from tests:

    def test_appearance():
        assert_snapshot.devices(SubjectView())
"""

import inspect
import time
from typing import Any, Optional

from .device import SnapshotDevice
from .gateway import FixtureStore, Outcome, Renderer, SourceLocation
from .matrix import EntryKind, RenderRequest, expand
from .policy import SnapshotPolicy
from .render import MatplotlibRenderer
from .resolve import CallOverrides, EffectiveConfig, resolve
from .store import FileFixtureStore
from .traits import Layout
from . import log


class SnapshotAssertionError(AssertionError):
    """One or more renders of a snapshot call did not match their fixtures."""

    def __init__(self, location: SourceLocation, failures: list[Outcome]):
        self.location = location
        self.failures = failures
        lines = [f"{len(failures)} snapshot(s) failed at {location}:"]
        for outcome in failures:
            lines.append(f"- {outcome.identifier} [{outcome.status}]")
            if outcome.message:
                lines.extend(f"    {line}" for line in outcome.message.splitlines())
        super().__init__("\n".join(lines))


class SnapshotTest:
    """Default setup applied to every snapshot call.

    Properties are kept private so the public surface is only the four
    entry points.
    """

    def __init__(
        self,
        policy: SnapshotPolicy,
        renderer: Optional[Renderer] = None,
        store: Optional[FixtureStore] = None,
    ):
        self._policy = policy
        self._renderer = renderer or MatplotlibRenderer()
        self._store = store or FileFixtureStore()

    def layout(
        self,
        view: Any,
        layout: Layout,
        *,
        test_dynamic_size: bool = True,
        record: Optional[bool] = None,
        wait: float = 0.0,
        precision: float = 1.0,
        name_addition: Optional[str] = None,
        file: Optional[str] = None,
        line: Optional[int] = None,
        test_name: Optional[str] = None,
    ) -> list[Outcome]:
        """Snapshot a view in an explicit layout."""
        overrides = CallOverrides(
            record=record,
            test_dynamic_size=test_dynamic_size,
            wait=wait,
            precision=precision,
            name_addition=name_addition,
        )
        location = _caller_location(file, line, test_name)
        return self._assert(view, "layout", overrides, location, layout)

    def component(
        self,
        view: Any,
        *,
        test_dynamic_size: bool = True,
        record: Optional[bool] = None,
        wait: float = 0.0,
        precision: float = 1.0,
        name_addition: Optional[str] = None,
        file: Optional[str] = None,
        line: Optional[int] = None,
        test_name: Optional[str] = None,
    ) -> list[Outcome]:
        """Snapshot a design component at its natural size."""
        overrides = CallOverrides(
            record=record,
            test_dynamic_size=test_dynamic_size,
            wait=wait,
            precision=precision,
            name_addition=name_addition,
        )
        location = _caller_location(file, line, test_name)
        return self._assert(view, "component", overrides, location)

    def devices(
        self,
        view: Any,
        *,
        test_dynamic_size: bool = True,
        record: Optional[bool] = None,
        wait: float = 0.0,
        scroll_view_multiplier: Optional[float] = None,
        precision: float = 1.0,
        name_addition: Optional[str] = None,
        file: Optional[str] = None,
        line: Optional[int] = None,
        test_name: Optional[str] = None,
    ) -> list[Outcome]:
        """Snapshot a view on every policy device.

        ``scroll_view_multiplier`` adds a long device after the policy
        devices, for screens whose content scrolls.
        """
        overrides = CallOverrides(
            record=record,
            test_dynamic_size=test_dynamic_size,
            scroll_view_multiplier=scroll_view_multiplier,
            wait=wait,
            precision=precision,
            name_addition=name_addition,
        )
        location = _caller_location(file, line, test_name)
        return self._assert(view, "devices", overrides, location)

    def device(
        self,
        view: Any,
        device: SnapshotDevice,
        *,
        test_dynamic_size: bool = True,
        record: Optional[bool] = None,
        wait: float = 0.0,
        precision: float = 1.0,
        name_addition: Optional[str] = None,
        file: Optional[str] = None,
        line: Optional[int] = None,
        test_name: Optional[str] = None,
    ) -> list[Outcome]:
        """Snapshot a view on one device."""
        overrides = CallOverrides(
            record=record,
            test_dynamic_size=test_dynamic_size,
            device=device,
            wait=wait,
            precision=precision,
            name_addition=name_addition,
        )
        location = _caller_location(file, line, test_name)
        return self._assert(view, "device", overrides, location)

    def _assert(
        self,
        view: Any,
        kind: EntryKind,
        overrides: CallOverrides,
        location: SourceLocation,
        layout: Optional[Layout] = None,
    ) -> list[Outcome]:
        config = resolve(self._policy, overrides)
        requests = expand(view, config, kind, layout)
        log.debug(f"{kind} snapshot at {location}: {len(requests)} render(s)")

        outcomes = [self._run(request, config, location) for request in requests]

        failures = [outcome for outcome in outcomes if outcome.failed]
        if failures:
            raise SnapshotAssertionError(location, failures)
        return outcomes

    def _run(
        self,
        request: RenderRequest,
        config: EffectiveConfig,
        location: SourceLocation,
    ) -> Outcome:
        # Let asynchronous content (images, animations) settle
        if config.wait > 0:
            time.sleep(config.wait)

        image = self._renderer.render(request.view, request.traits)
        outcome = self._store.compare_or_record(
            image,
            request.identifier,
            config.record,
            config.precision,
            location,
        )
        log.debug(f"{request.identifier}: {outcome.status}")
        return outcome


def _caller_location(
    file: Optional[str],
    line: Optional[int],
    test_name: Optional[str],
) -> SourceLocation:
    """Fill missing location fields from the frame calling the entry point."""
    frame = inspect.currentframe()
    try:
        # _caller_location <- entry point <- test
        caller = frame.f_back.f_back
        return SourceLocation(
            file=file if file is not None else caller.f_code.co_filename,
            line=line if line is not None else caller.f_lineno,
            test_name=test_name if test_name is not None else caller.f_code.co_name,
        )
    finally:
        del frame
