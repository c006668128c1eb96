"""Time zone resolution.

This module answers two questions about time zones:

    - Which offset does a named zone use at an absolute instant?
    - Which instants can a local wall-clock reading in a named zone
      denote? (none in a spring-forward gap, one ordinarily, two in a
      fall-back overlap)

and builds the host-zone conversions ``local_time`` and ``utc_time`` on
top of them.

A ``TimeZoneResolver`` holds its collaborators: the rules database and
the system zone cache. The module-level functions delegate to a default
resolver backed by ``ZoneInfoDatabase``; ``set_default_resolver`` replaces
it, for example with a resolver over a fake database in tests.

Disambiguation policy of ``utc_time``: a repeated local reading is read
with the offset in effect before the transition (the earlier instant); a
skipped local reading is read with the offset of the last valid instant
before the gap.

Examples:
    >>> from epochal.core.calendar import CalendarFields
    >>> resolver = TimeZoneResolver()
    >>> fields = CalendarFields(2024, 6, 1, 12)
    >>> [ns // 10**9 for ns in resolver.named_zone_epoch_candidates("Asia/Kolkata", fields)]
    [1719815400]
"""

from __future__ import annotations

import logging
import threading

from epochal._internal.constants import (
    INT32_MAX,
    INT32_MIN,
    MS_PER_SECOND,
    NANOS_PER_DAY,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from epochal._internal.numeric import floor, is_finite
from epochal.convert.epoch import (
    clip_bigint_to_int64,
    clip_double_to_int64,
    get_utc_epoch_nanoseconds,
)
from epochal.core.calendar import CalendarFields, year_from_time
from epochal.errors import InvariantError, TimezoneError
from epochal.format.offset import is_fixed_offset_identifier
from epochal.tz.cache import SystemZoneCache
from epochal.tz.database import TimeZoneDatabase, ZoneInfoDatabase
from epochal.units.timezone import TimeZoneIdentifier, parse_time_zone_identifier

logger = logging.getLogger(__name__)


def _truncate_to_milliseconds(offset_nanoseconds: int) -> int:
    """Truncate an offset toward zero to whole milliseconds."""
    milliseconds = abs(offset_nanoseconds) // NANOS_PER_MILLISECOND
    return -milliseconds if offset_nanoseconds < 0 else milliseconds


class TimeZoneResolver:
    """Resolves UTC offsets of named, fixed-offset and system time zones.

    Args:
        database: The time zone rules database. Defaults to a
            ``ZoneInfoDatabase``.
        cache: The cache for the system zone identifier. Defaults to a
            new ``SystemZoneCache``.
    """

    def __init__(
        self,
        database: TimeZoneDatabase | None = None,
        cache: SystemZoneCache | None = None,
    ) -> None:
        self.database: TimeZoneDatabase = database if database is not None else ZoneInfoDatabase()
        self.cache: SystemZoneCache = cache if cache is not None else SystemZoneCache()

    # ------------------------------------------------------------------
    # Named zones
    # ------------------------------------------------------------------

    def _candidates_for_local(self, zone: str, local_nanoseconds: int) -> list[int]:
        offsets = self.database.candidate_offsets(zone, clip_bigint_to_int64(local_nanoseconds))
        return [local_nanoseconds - offset for offset in offsets]

    def named_zone_epoch_candidates(
        self,
        zone: str,
        fields: CalendarFields,
        *,
        microsecond: int = 0,
        nanosecond: int = 0,
    ) -> list[int]:
        """Return the instants at which ``zone`` shows a local reading.

        Args:
            zone: A named zone identifier.
            fields: The local wall-clock reading.
            microsecond: Microseconds past the millisecond (0-999).
            nanosecond: Nanoseconds past the microsecond (0-999).

        Returns:
            Epoch nanoseconds, earliest first: none for a reading skipped
            by a forward transition, two for a repeated reading.
        """
        local_nanoseconds = get_utc_epoch_nanoseconds(
            fields, microsecond=microsecond, nanosecond=nanosecond
        )
        return self._candidates_for_local(zone, local_nanoseconds)

    def named_zone_offset_nanoseconds(self, zone: str, epoch_nanoseconds: int) -> int:
        """Return the offset of ``zone`` at an exact instant, in nanoseconds.

        The rules database has no sub-second offsets, so the instant is
        looked up at the whole second containing it.
        """
        seconds = epoch_nanoseconds // NANOS_PER_SECOND
        return self.database.offset_at(zone, clip_bigint_to_int64(seconds))

    def named_zone_offset_milliseconds(self, zone: str, epoch_milliseconds: float) -> int:
        """Return the offset of ``zone`` at a time value, in nanoseconds.

        Agrees with ``named_zone_offset_nanoseconds`` for the same instant
        without building an exact nanosecond count.

        Raises:
            InvariantError: If ``epoch_milliseconds`` is NaN.
        """
        seconds = floor(epoch_milliseconds / MS_PER_SECOND)
        return self.database.offset_at(zone, clip_double_to_int64(seconds))

    # ------------------------------------------------------------------
    # System zone
    # ------------------------------------------------------------------

    def _compute_system_zone_identifier(self) -> str | None:
        """Return the host zone identifier, or None if it cannot be resolved."""
        try:
            zone = self.database.current_zone()
        except TimezoneError:
            logger.warning("cannot determine the host time zone; using UTC", exc_info=True)
            return None

        if is_fixed_offset_identifier(zone):
            logger.debug("system time zone is the fixed offset %s", zone)
            return zone

        primary = self.database.primary_identifier(zone)
        if primary is None:
            logger.warning("host time zone %r is not a known zone; using UTC", zone)
            return None

        logger.debug("system time zone %r resolved to %s", zone, primary)
        return primary

    def system_zone_identifier(self) -> str:
        """Return the host's time zone identifier.

        The identifier is either a minute-precision offset such as
        ``"+05:30"`` or the primary identifier of a named zone; a host
        zone that cannot be determined or that the database does not know
        becomes ``"UTC"``. A resolved identifier is cached until
        ``clear_system_zone_cache`` is called; the UTC fallback is not
        cached, so the host is asked again on the next lookup.
        """
        zone = self.cache.get_or_compute(self._compute_system_zone_identifier)
        if zone is None:
            return TimeZoneIdentifier.utc().name
        return zone

    def clear_system_zone_cache(self) -> None:
        """Forget the cached system zone; the next lookup asks the host again."""
        self.cache.invalidate()

    # ------------------------------------------------------------------
    # Local time conversions
    # ------------------------------------------------------------------

    def local_time(self, t: float) -> float:
        """Convert a UTC time value to the system zone's local time.

        Non-finite time values are returned unchanged.

        Examples:
            >>> resolver = TimeZoneResolver()
            >>> resolver.cache.get_or_compute(lambda: "+05:30")
            '+05:30'
            >>> resolver.local_time(0.0)
            19800000.0
        """
        if not is_finite(t):
            return t

        zone = self.system_zone_identifier()
        identifier = parse_time_zone_identifier(zone)

        if identifier == TimeZoneIdentifier.utc():
            return t
        if identifier.is_fixed_offset:
            offset_nanoseconds = identifier.offset_nanoseconds
        else:
            offset_nanoseconds = self.named_zone_offset_milliseconds(zone, t)

        return t + _truncate_to_milliseconds(offset_nanoseconds)

    def _instant_before_gap(self, zone: str, local_nanoseconds: int) -> int:
        """Return the last valid instant before the gap containing a local reading.

        The offsets a day either side of the reading bracket the forward
        transition. Moving the reading back by the size of the transition
        lands on a local reading before the gap, whose latest instant is
        read with the offset in effect before the transition.
        """
        before = self.named_zone_offset_nanoseconds(zone, local_nanoseconds - NANOS_PER_DAY)
        after = self.named_zone_offset_nanoseconds(zone, local_nanoseconds + NANOS_PER_DAY)
        skipped = after - before

        if skipped <= 0:
            raise InvariantError(
                f"local time {local_nanoseconds} ns in {zone!r} has no instant, "
                "but no forward transition surrounds it"
            )

        candidates = self._candidates_for_local(zone, local_nanoseconds - skipped)
        if not candidates:
            raise InvariantError(
                f"local time {local_nanoseconds - skipped} ns in {zone!r} "
                "before a forward transition has no instant"
            )

        logger.debug(
            "local time %d ns skipped in %s; using offset before the transition",
            local_nanoseconds,
            zone,
        )
        return candidates[-1]

    def utc_time(self, t: float) -> float:
        """Convert a local time value in the system zone to UTC.

        A repeated local reading resolves to its earlier instant and a
        skipped one to the offset in effect before the gap. Non-finite
        time values are returned unchanged.
        """
        if not is_finite(t):
            return t

        zone = self.system_zone_identifier()
        identifier = parse_time_zone_identifier(zone)

        if identifier == TimeZoneIdentifier.utc():
            return t
        if identifier.is_fixed_offset:
            offset_nanoseconds = identifier.offset_nanoseconds
        elif not INT32_MIN <= year_from_time(t) <= INT32_MAX:
            # No calendar reading exists this far out; read it as an instant
            offset_nanoseconds = self.named_zone_offset_milliseconds(zone, t)
        else:
            fields = CalendarFields.from_time_value(t)
            local_nanoseconds = get_utc_epoch_nanoseconds(fields)
            candidates = self._candidates_for_local(zone, local_nanoseconds)

            if candidates:
                instant = candidates[0]
            else:
                instant = self._instant_before_gap(zone, local_nanoseconds)

            offset_nanoseconds = self.named_zone_offset_nanoseconds(zone, instant)

        return t - _truncate_to_milliseconds(offset_nanoseconds)


_default_resolver: TimeZoneResolver | None = None
_default_lock = threading.Lock()


def default_resolver() -> TimeZoneResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _default_resolver
    with _default_lock:
        if _default_resolver is None:
            _default_resolver = TimeZoneResolver()
        return _default_resolver


def set_default_resolver(resolver: TimeZoneResolver | None) -> None:
    """Replace the process-wide resolver; None restores a fresh default."""
    global _default_resolver
    with _default_lock:
        _default_resolver = resolver


def named_zone_epoch_candidates(
    zone: str,
    fields: CalendarFields,
    *,
    microsecond: int = 0,
    nanosecond: int = 0,
) -> list[int]:
    """See ``TimeZoneResolver.named_zone_epoch_candidates``."""
    return default_resolver().named_zone_epoch_candidates(
        zone, fields, microsecond=microsecond, nanosecond=nanosecond
    )


def named_zone_offset_nanoseconds(zone: str, epoch_nanoseconds: int) -> int:
    """See ``TimeZoneResolver.named_zone_offset_nanoseconds``."""
    return default_resolver().named_zone_offset_nanoseconds(zone, epoch_nanoseconds)


def named_zone_offset_milliseconds(zone: str, epoch_milliseconds: float) -> int:
    """See ``TimeZoneResolver.named_zone_offset_milliseconds``."""
    return default_resolver().named_zone_offset_milliseconds(zone, epoch_milliseconds)


def system_zone_identifier() -> str:
    """See ``TimeZoneResolver.system_zone_identifier``."""
    return default_resolver().system_zone_identifier()


def clear_system_zone_cache() -> None:
    """See ``TimeZoneResolver.clear_system_zone_cache``."""
    default_resolver().clear_system_zone_cache()


def local_time(t: float) -> float:
    """See ``TimeZoneResolver.local_time``."""
    return default_resolver().local_time(t)


def utc_time(t: float) -> float:
    """See ``TimeZoneResolver.utc_time``."""
    return default_resolver().utc_time(t)


__all__ = [
    "TimeZoneResolver",
    "default_resolver",
    "set_default_resolver",
    "named_zone_epoch_candidates",
    "named_zone_offset_nanoseconds",
    "named_zone_offset_milliseconds",
    "system_zone_identifier",
    "clear_system_zone_cache",
    "local_time",
    "utc_time",
]
