"""Time zone rules database.

Time zone resolution consumes the rules database through the
``TimeZoneDatabase`` protocol:

    - offset_at: the offset in effect at an absolute instant
    - candidate_offsets: the offsets that can produce a local reading
    - current_zone: the host's configured zone
    - primary_identifier: the canonical name of a named zone

``ZoneInfoDatabase`` implements it with the standard library's
``zoneinfo`` (rules from the ``tzdata`` distribution when the host has
none) and asks ``tzlocal`` for the host zone, which honours the ``TZ``
environment variable.

Offsets are signed integer nanoseconds, positive east of UTC.
"""

from __future__ import annotations

import logging
import zoneinfo
from datetime import datetime, timedelta, timezone
from importlib import resources
from pathlib import Path
from typing import Callable, Protocol

import tzlocal

from epochal._internal.constants import NANOS_PER_MICROSECOND, NANOS_PER_SECOND
from epochal._internal.decorators import memoize
from epochal.errors import TimezoneError

logger = logging.getLogger(__name__)

# Identifiers that name UTC itself; they canonicalize to "UTC"
UTC_ALIASES: frozenset[str] = frozenset(
    {
        "utc", "etc/utc", "uct", "etc/uct",
        "gmt", "etc/gmt", "gmt0", "etc/gmt0",
        "gmt+0", "etc/gmt+0", "gmt-0", "etc/gmt-0",
        "greenwich", "etc/greenwich",
        "universal", "etc/universal",
        "zulu", "etc/zulu",
    }
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NAIVE_EPOCH = datetime(1970, 1, 1)

# ``datetime`` cannot go past years 1-9999; a day of margin keeps local
# conversions in range for any offset.
_MIN_SECONDS = int((datetime(1, 1, 2, tzinfo=timezone.utc) - _EPOCH).total_seconds())
_MAX_SECONDS = int((datetime(9999, 12, 30, tzinfo=timezone.utc) - _EPOCH).total_seconds())


class TimeZoneDatabase(Protocol):
    """The operations time zone resolution needs from a rules database."""

    def offset_at(self, zone: str, epoch_seconds: int) -> int:
        """Return the offset of ``zone`` in effect at an instant."""
        ...

    def candidate_offsets(self, zone: str, local_nanoseconds: int) -> tuple[int, ...]:
        """Return the offsets under which ``zone`` shows a local reading.

        The local reading is given as nanoseconds since the epoch as if it
        were UTC. The result has no entries for a reading skipped by a
        forward transition, one for an ordinary reading and two for a
        repeated reading, ordered so that the earlier instant comes first.
        """
        ...

    def current_zone(self) -> str:
        """Return the host's configured zone string."""
        ...

    def primary_identifier(self, name: str) -> str | None:
        """Return the primary identifier of a named zone, or None if unknown."""
        ...


def _timedelta_nanoseconds(delta: timedelta) -> int:
    return (delta // timedelta(microseconds=1)) * NANOS_PER_MICROSECOND


def _clamp_seconds(seconds: int) -> int:
    return max(_MIN_SECONDS, min(_MAX_SECONDS, seconds))


def _zone_data_paths() -> list:
    paths: list = []
    try:
        paths.append(resources.files("tzdata").joinpath("zoneinfo", "tzdata.zi"))
    except ModuleNotFoundError:
        logger.debug("tzdata package not installed; using host zone data only")
    paths.extend(Path(root, "tzdata.zi") for root in zoneinfo.TZPATH)
    return paths


@memoize
def zone_links() -> dict[str, str]:
    """Return the tz link table, mapping lowercased link names to targets.

    The table is read from the first ``tzdata.zi`` found in the ``tzdata``
    package or on ``zoneinfo.TZPATH``. Without one, no links are known.
    """
    for path in _zone_data_paths():
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            continue

        links: dict[str, str] = {}
        for line in text.splitlines():
            parts = line.split()
            # "L <target> <link name>"
            if len(parts) == 3 and parts[0] == "L":
                links[parts[2].lower()] = parts[1]
        logger.debug("loaded %d time zone links from %s", len(links), path)
        return links

    logger.debug("no tzdata.zi found; time zone links are unavailable")
    return {}


@memoize
def available_zones() -> dict[str, str]:
    """Return the available zone names, keyed by their lowercased form."""
    return {name.lower(): name for name in zoneinfo.available_timezones()}


class ZoneInfoDatabase:
    """Time zone database backed by ``zoneinfo`` and ``tzlocal``.

    Args:
        host_zone: Callable returning the host's configured zone string.
            Defaults to ``tzlocal.get_localzone_name``.

    Examples:
        >>> db = ZoneInfoDatabase()
        >>> db.offset_at("Asia/Kolkata", 0)
        19800000000000
        >>> db.primary_identifier("etc/utc")
        'UTC'
    """

    def __init__(self, host_zone: Callable[[], str | None] | None = None) -> None:
        self._host_zone = host_zone if host_zone is not None else tzlocal.get_localzone_name

    def _zone(self, name: str) -> zoneinfo.ZoneInfo:
        try:
            return zoneinfo.ZoneInfo(name)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise TimezoneError(f"Unknown time zone: {name!r}") from exc

    def offset_at(self, zone: str, epoch_seconds: int) -> int:
        """Return the offset of ``zone`` in effect at an instant.

        Instants beyond what ``datetime`` can represent are moved to the
        nearest representable one.
        """
        instant = _EPOCH + timedelta(seconds=_clamp_seconds(epoch_seconds))
        offset = instant.astimezone(self._zone(zone)).utcoffset()
        return _timedelta_nanoseconds(offset)

    def candidate_offsets(self, zone: str, local_nanoseconds: int) -> tuple[int, ...]:
        """Return the offsets under which ``zone`` shows a local reading.

        ``zoneinfo`` resolves a reading near a transition by its ``fold``:
        fold 0 takes the offset before the transition and fold 1 the offset
        after. Equal offsets mean an ordinary reading; a larger offset
        before the transition means the reading repeats; a smaller one
        means the reading was skipped.
        """
        tz = self._zone(zone)
        seconds, remainder = divmod(local_nanoseconds, NANOS_PER_SECOND)
        local = _NAIVE_EPOCH + timedelta(
            seconds=_clamp_seconds(seconds),
            microseconds=remainder // NANOS_PER_MICROSECOND,
        )

        before = local.replace(tzinfo=tz, fold=0).utcoffset()
        after = local.replace(tzinfo=tz, fold=1).utcoffset()

        if before == after:
            return (_timedelta_nanoseconds(before),)
        if before > after:
            return (_timedelta_nanoseconds(before), _timedelta_nanoseconds(after))
        return ()

    def current_zone(self) -> str:
        """Return the host's configured zone string.

        Raises:
            TimezoneError: If the host zone cannot be determined.
        """
        try:
            name = self._host_zone()
        except (zoneinfo.ZoneInfoNotFoundError, LookupError, OSError, ValueError) as exc:
            raise TimezoneError("Cannot determine the host time zone") from exc

        if not name:
            raise TimezoneError("Cannot determine the host time zone")
        return name

    def primary_identifier(self, name: str) -> str | None:
        """Return the primary identifier of a named zone, or None if unknown.

        Names match case-insensitively; links are followed to their target,
        and every alias of UTC becomes "UTC".
        """
        key = name.lower()
        if key in UTC_ALIASES:
            return "UTC"

        links = zone_links()
        resolved = available_zones().get(key)
        if resolved is None and key not in links:
            return None

        seen: set[str] = set()
        while key in links and key not in seen:
            seen.add(key)
            resolved = links[key]
            key = resolved.lower()

        if key in UTC_ALIASES:
            return "UTC"
        return resolved


__all__ = [
    "UTC_ALIASES",
    "TimeZoneDatabase",
    "ZoneInfoDatabase",
    "available_zones",
    "zone_links",
]
