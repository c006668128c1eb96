"""Pytest configuration and fixtures for Epochal tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add the parent directory to sys.path so epochal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from epochal.errors import TimezoneError  # noqa: E402
from epochal.tz.resolution import TimeZoneResolver, set_default_resolver  # noqa: E402

HOUR_NS = 3_600 * 10**9


class FakeTimeZoneDatabase:
    """In-memory rules database with a single transition per zone.

    Each zone is ``(before, after, transition_seconds)``: the offset
    ``before`` applies to instants earlier than the transition and
    ``after`` from it onward. The host zone is whatever ``host`` returns.
    """

    def __init__(
        self,
        zones: dict[str, tuple[int, int, int]] | None = None,
        host: Callable[[], str] | str = "UTC",
    ) -> None:
        self.zones = dict(zones or {})
        self.zones.setdefault("UTC", (0, 0, 0))
        self.host = host
        self.current_zone_calls = 0

    def _rules(self, zone: str) -> tuple[int, int, int]:
        try:
            return self.zones[zone]
        except KeyError as exc:
            raise TimezoneError(f"Unknown time zone: {zone!r}") from exc

    def offset_at(self, zone: str, epoch_seconds: int) -> int:
        before, after, transition = self._rules(zone)
        return before if epoch_seconds < transition else after

    def candidate_offsets(self, zone: str, local_nanoseconds: int) -> tuple[int, ...]:
        before, after, transition = self._rules(zone)
        transition_ns = transition * 10**9
        offsets = []
        for offset in sorted({before, after}, reverse=True):
            instant = local_nanoseconds - offset
            in_effect = before if instant < transition_ns else after
            if in_effect == offset:
                offsets.append(offset)
        return tuple(offsets)

    def current_zone(self) -> str:
        self.current_zone_calls += 1
        if callable(self.host):
            return self.host()
        return self.host

    def primary_identifier(self, name: str) -> str | None:
        for zone in self.zones:
            if zone.lower() == name.lower():
                return zone
        return None


@pytest.fixture(autouse=True)
def isolated_default_resolver():
    """Give every test a fresh process-wide resolver."""
    set_default_resolver(None)
    yield
    set_default_resolver(None)


@pytest.fixture
def fake_database() -> FakeTimeZoneDatabase:
    """A database with a one-hour forward transition at 10000 s and a
    one-hour backward transition at 20000 s, hosted in "Test/Forward"."""
    return FakeTimeZoneDatabase(
        zones={
            "Test/Forward": (0, HOUR_NS, 10_000),
            "Test/Backward": (HOUR_NS, 0, 20_000),
        },
        host="Test/Forward",
    )


@pytest.fixture
def make_resolver() -> Callable[..., TimeZoneResolver]:
    """Build a resolver over the real zone database with a fixed host zone."""
    from epochal.tz.database import ZoneInfoDatabase

    def factory(host_zone: str) -> TimeZoneResolver:
        return TimeZoneResolver(ZoneInfoDatabase(host_zone=lambda: host_zone))

    return factory
