"""
s3v4.datetime_utils
~~~~~~~~~~~~~~~~~~~

Clocks and the two date representations used by Signature Version 4.

A clock is any callable taking no arguments and returning a
:class:`datetime.datetime`. Signing code never reads the system time
itself; the clock is always passed in.
"""

from datetime import datetime, timezone

AMZ_DATE_FORMAT = "%Y%m%dT%H%M%SZ"


def get_utc_datetime():
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def fixed_clock(instant):
    """
    Build a clock that always returns ``instant``.

    Args:
        instant (datetime): The time to report

    Returns:
        callable: A zero-argument clock
    """

    def clock():
        return instant

    return clock


class AmzDate(object):
    """
    A single captured instant rendered the way SigV4 needs it.

    ``full_date`` goes into the ``X-Amz-Date`` header and the string to
    sign, ``date_stamp`` into the credential scope and the signing key.
    Both come from the same instant.

    Args:
        instant (datetime): Naive values are taken to be UTC
    """

    __slots__ = ("full_date", "date_stamp")

    def __init__(self, instant):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        else:
            instant = instant.astimezone(timezone.utc)
        self.full_date = instant.strftime(AMZ_DATE_FORMAT)
        self.date_stamp = self.full_date[:8]

    @classmethod
    def now(cls, clock=get_utc_datetime):
        """Capture one instant from ``clock``."""
        return cls(clock())

    def __eq__(self, other):
        if not isinstance(other, AmzDate):
            return NotImplemented
        return self.full_date == other.full_date

    def __hash__(self):
        return hash(self.full_date)

    def __repr__(self):
        return "AmzDate({0!r})".format(self.full_date)
