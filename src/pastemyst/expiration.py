r"""Parse expiration expressions and resolve them to absolute times.

An expiration expression is either ``never`` (case-insensitive) or an
optional non-negative integer magnitude followed by a single-letter
unit:

====  ======
Code  Unit
====  ======
m     minute
h, H  hour
d, D  day
w, W  week
M     month
y, Y  year
====  ======

``m`` and ``M`` are case-distinguished; a missing magnitude means 1.

PasteMyst itself only accepts a fixed set of codes on the wire, where
``m`` means *month* (see ``ExpiresIn``). ``to_wire`` and ``from_wire``
translate between those codes and ``ExpirationSpec`` values.

Example:
    ```pycon
    >>> from datetime import datetime, timezone
    >>> from pastemyst.expiration import parse_expiration, resolve
    >>> spec = parse_expiration("2d")
    >>> spec
    Duration(magnitude=2, unit=<ExpirationUnit.DAY: 'days'>)
    >>> resolve(spec, datetime(2024, 1, 1, tzinfo=timezone.utc))
    datetime.datetime(2024, 1, 3, 0, 0, tzinfo=datetime.timezone.utc)
    >>> resolve(parse_expiration("never"), datetime(2024, 1, 1, tzinfo=timezone.utc)) is None
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "NEVER",
    "Duration",
    "ExpirationSpec",
    "ExpirationUnit",
    "ExpiresIn",
    "Never",
    "coerce_expiration",
    "expires_into_unix",
    "from_wire",
    "parse_expiration",
    "resolve",
    "to_wire",
]

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Union

from dateutil.relativedelta import relativedelta

from pastemyst.exceptions import (
    DecodeError,
    InvalidFormatError,
    InvalidMagnitudeError,
    ValidationError,
)


class ExpirationUnit(Enum):
    r"""Units of an expiration duration.

    The values are the matching ``relativedelta`` keyword names.
    """

    MINUTE = "minutes"
    HOUR = "hours"
    DAY = "days"
    WEEK = "weeks"
    MONTH = "months"
    YEAR = "years"


_UNIT_CODES: dict[str, ExpirationUnit] = {
    "m": ExpirationUnit.MINUTE,
    "h": ExpirationUnit.HOUR,
    "H": ExpirationUnit.HOUR,
    "d": ExpirationUnit.DAY,
    "D": ExpirationUnit.DAY,
    "w": ExpirationUnit.WEEK,
    "W": ExpirationUnit.WEEK,
    "M": ExpirationUnit.MONTH,
    "y": ExpirationUnit.YEAR,
    "Y": ExpirationUnit.YEAR,
}

_UNIT_LETTERS: dict[ExpirationUnit, str] = {
    ExpirationUnit.MINUTE: "m",
    ExpirationUnit.HOUR: "h",
    ExpirationUnit.DAY: "d",
    ExpirationUnit.WEEK: "w",
    ExpirationUnit.MONTH: "M",
    ExpirationUnit.YEAR: "y",
}

_EXPRESSION_PATTERN = re.compile(r"^(?P<magnitude>[-+]?[0-9.,_]*)(?P<unit>[A-Za-z])$")


@dataclass(frozen=True)
class Never:
    r"""Expiration of a paste that is never deleted."""

    def __str__(self) -> str:
        return "never"


NEVER = Never()


@dataclass(frozen=True)
class Duration:
    r"""Expiration after a relative duration.

    Args:
        magnitude: The number of units. Must be >= 0.
        unit: The unit of the duration.

    Raises:
        ValueError: if ``magnitude`` is negative.
    """

    magnitude: int
    unit: ExpirationUnit

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            msg = f"magnitude must be >= 0, got {self.magnitude}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.magnitude}{_UNIT_LETTERS[self.unit]}"


ExpirationSpec = Union[Never, Duration]


class ExpiresIn:
    r"""Expiration codes accepted by the PasteMyst API."""

    NEVER = "never"
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    TEN_HOURS = "10h"
    ONE_DAY = "1d"
    TWO_DAYS = "2d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1m"
    ONE_YEAR = "1y"


_WIRE_CODES: dict[str, ExpirationSpec] = {
    ExpiresIn.NEVER: NEVER,
    ExpiresIn.ONE_HOUR: Duration(1, ExpirationUnit.HOUR),
    ExpiresIn.TWO_HOURS: Duration(2, ExpirationUnit.HOUR),
    ExpiresIn.TEN_HOURS: Duration(10, ExpirationUnit.HOUR),
    ExpiresIn.ONE_DAY: Duration(1, ExpirationUnit.DAY),
    ExpiresIn.TWO_DAYS: Duration(2, ExpirationUnit.DAY),
    ExpiresIn.ONE_WEEK: Duration(1, ExpirationUnit.WEEK),
    ExpiresIn.ONE_MONTH: Duration(1, ExpirationUnit.MONTH),
    ExpiresIn.ONE_YEAR: Duration(1, ExpirationUnit.YEAR),
}
_SPEC_TO_WIRE: dict[ExpirationSpec, str] = {spec: code for code, spec in _WIRE_CODES.items()}


def parse_expiration(expression: str) -> ExpirationSpec:
    r"""Parse an expiration expression.

    Args:
        expression: The expression to parse, e.g. ``"never"``,
            ``"1d"``, ``"12h"`` or ``"M"``. Surrounding whitespace is
            ignored.

    Returns:
        ``NEVER`` or the parsed ``Duration``.

    Raises:
        InvalidFormatError: if the expression is neither ``never`` nor
            a magnitude followed by a known unit letter.
        InvalidMagnitudeError: if the numeric part is not a valid
            non-negative integer.

    Example:
        ```pycon
        >>> from pastemyst.expiration import parse_expiration
        >>> parse_expiration("NEVER")
        Never()
        >>> parse_expiration("3M")
        Duration(magnitude=3, unit=<ExpirationUnit.MONTH: 'months'>)
        >>> parse_expiration("3m")
        Duration(magnitude=3, unit=<ExpirationUnit.MINUTE: 'minutes'>)

        ```
    """
    text = expression.strip()
    if text.casefold() == "never":
        return NEVER
    match = _EXPRESSION_PATTERN.match(text)
    if match is None or match.group("unit") not in _UNIT_CODES:
        msg = f"invalid expiration expression {expression!r}: expected 'never' or <number><unit>"
        raise InvalidFormatError(expression, msg)
    magnitude = match.group("magnitude")
    if not magnitude:
        return Duration(1, _UNIT_CODES[match.group("unit")])
    if not magnitude.isdigit():
        msg = f"invalid magnitude {magnitude!r} in expiration expression {expression!r}"
        raise InvalidMagnitudeError(expression, msg)
    return Duration(int(magnitude), _UNIT_CODES[match.group("unit")])


def resolve(spec: ExpirationSpec, now: datetime) -> datetime | None:
    r"""Compute the absolute expiration time of a spec.

    Months and years use calendar arithmetic: when the target month is
    shorter, the day is clamped to its last day (January 31 plus one
    month is February 28 or 29).

    Args:
        spec: The expiration to resolve.
        now: The reference time.

    Returns:
        ``None`` for ``NEVER``, otherwise ``now`` shifted by the
            duration.

    Raises:
        ValueError: if the shifted time is outside the range of
            ``datetime``, e.g. ``parse_expiration("99999y")``.

    Example:
        ```pycon
        >>> from datetime import datetime, timezone
        >>> from pastemyst.expiration import Duration, ExpirationUnit, resolve
        >>> resolve(Duration(1, ExpirationUnit.MONTH), datetime(2024, 1, 31, tzinfo=timezone.utc))
        datetime.datetime(2024, 2, 29, 0, 0, tzinfo=datetime.timezone.utc)

        ```
    """
    if isinstance(spec, Never):
        return None
    try:
        return now + relativedelta(**{spec.unit.value: spec.magnitude})
    except (OverflowError, ValueError) as exc:
        msg = f"expiration {spec} from {now.isoformat()} is out of the supported date range"
        raise ValueError(msg) from exc


def expires_into_unix(created_at: int, expires_in: str | ExpirationSpec) -> int | None:
    r"""Compute the unix time when a paste will be deleted.

    This is the local counterpart of the service's
    ``time/expiresInToUnixTime`` endpoint.

    Args:
        created_at: The unix time when the paste was created.
        expires_in: A wire code, an expression, or a spec.

    Returns:
        The deletion unix time, or ``None`` if the paste never expires.

    Raises:
        ParseError: if ``expires_in`` is not a valid expression.
        ValueError: if the deletion time is outside the range of
            ``datetime``.

    Example:
        ```pycon
        >>> from pastemyst.expiration import ExpiresIn, expires_into_unix
        >>> expires_into_unix(0, ExpiresIn.ONE_DAY)
        86400
        >>> expires_into_unix(0, ExpiresIn.NEVER) is None
        True

        ```
    """
    spec = coerce_expiration(expires_in)
    deletes_at = resolve(spec, datetime.fromtimestamp(created_at, tz=timezone.utc))
    if deletes_at is None:
        return None
    return int(deletes_at.timestamp())


def coerce_expiration(value: str | ExpirationSpec) -> ExpirationSpec:
    r"""Convert a user-supplied expiration to a spec.

    Strings that are exactly one of the ``ExpiresIn`` codes keep their
    wire meaning (``"1m"`` is one month). Any other string is parsed with
    ``parse_expiration``.

    Args:
        value: A wire code, an expression, or a spec.

    Returns:
        The expiration spec.

    Raises:
        ParseError: if ``value`` is a string that cannot be parsed.
    """
    if isinstance(value, (Never, Duration)):
        return value
    if value in _WIRE_CODES:
        return _WIRE_CODES[value]
    return parse_expiration(value)


def to_wire(spec: ExpirationSpec) -> str:
    r"""Render a spec as a PasteMyst expiration code.

    Args:
        spec: The expiration to render.

    Returns:
        The wire code.

    Raises:
        ValidationError: if PasteMyst does not accept this expiration.

    Example:
        ```pycon
        >>> from pastemyst.expiration import Duration, ExpirationUnit, to_wire
        >>> to_wire(Duration(1, ExpirationUnit.MONTH))
        '1m'

        ```
    """
    code = _SPEC_TO_WIRE.get(spec)
    if code is None:
        accepted = ", ".join(_WIRE_CODES)
        msg = f"PasteMyst does not accept the expiration {spec}; accepted values: {accepted}"
        raise ValidationError(msg)
    return code


def from_wire(code: str) -> ExpirationSpec:
    r"""Decode a PasteMyst expiration code.

    Args:
        code: The code sent by the service.

    Returns:
        The matching spec.

    Raises:
        DecodeError: if the code is unknown.
    """
    spec = _WIRE_CODES.get(code)
    if spec is None:
        msg = f"unknown expiration code {code!r}"
        raise DecodeError(msg)
    return spec
