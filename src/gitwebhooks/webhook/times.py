"""
Timestamp types for the provider wire formats.

Python datetimes carry microseconds, so fractional seconds beyond six
digits are truncated when parsed.
"""
import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_CLOCK = r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))?"

RFC3339 = re.compile(rf"^{_DATE}T{_CLOCK}(?P<zone>Z|[+-]\d{{2}}:\d{{2}})$")

# "2006-01-02T15:04:05Z0700"
BITBUCKET_SERVER_LAYOUT = re.compile(rf"^{_DATE}T{_CLOCK}(?P<zone>Z|[+-]\d{{4}})$")

# GitLab layouts, tried in order.
GITLAB_LAYOUTS = (
    re.compile(rf"^{_DATE} {_CLOCK} (?P<zone>[A-Za-z]{{3,5}})$"),
    re.compile(rf"^{_DATE} {_CLOCK} (?P<zone>Z|[+-]\d{{2}}:\d{{2}})$"),
    re.compile(rf"^{_DATE} {_CLOCK} (?P<zone>Z|[+-]\d{{4}})$"),
    RFC3339,
    re.compile(rf"^{_DATE}$"),
)


def _zone(text: Optional[str]) -> timezone:
    # Zone abbreviations carry no offset information; they are read as UTC.
    if not text or text.isalpha():
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    offset = timedelta(hours=int(digits[:2]), minutes=int(digits[2:4]))
    return timezone(sign * offset)


def _match(value: str, layout: re.Pattern) -> Optional[datetime]:
    match = layout.match(value)
    if match is None:
        return None
    parts = match.groupdict()
    fraction = parts.get("fraction") or ""
    return datetime(
        int(parts["year"]),
        int(parts["month"]),
        int(parts["day"]),
        int(parts.get("hour") or 0),
        int(parts.get("minute") or 0),
        int(parts.get("second") or 0),
        int(fraction[:6].ljust(6, "0")) if fraction else 0,
        tzinfo=_zone(parts.get("zone")),
    )


def parse_rfc3339(value: Any) -> Any:
    """Parse an RFC 3339 timestamp with optional (nano)second fraction."""
    if not isinstance(value, str):
        return value
    parsed = _match(value, RFC3339)
    if parsed is None:
        raise ValueError(f"invalid RFC3339 time {value!r}")
    return parsed


def parse_gitlab_time(value: Any) -> Any:
    """Parse any of the timestamp layouts GitLab emits.

    The literal ``"null"`` and the empty string yield ``ZERO_TIME``.
    """
    if not isinstance(value, str):
        return value
    if value in ("", "null"):
        return ZERO_TIME
    for layout in GITLAB_LAYOUTS:
        parsed = _match(value, layout)
        if parsed is not None:
            return parsed
    raise ValueError(f"unrecognised GitLab time {value!r}")


def parse_bitbucket_server_time(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    parsed = _match(value, BITBUCKET_SERVER_LAYOUT)
    if parsed is None:
        raise ValueError(f"invalid Bitbucket Server time {value!r}")
    return parsed


def _format_offset(moment: datetime, colon: bool) -> str:
    offset = moment.utcoffset()
    if not offset:
        return "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _clock(moment: datetime) -> str:
    return moment.replace(tzinfo=None, microsecond=0).isoformat()


def format_bitbucket_server_time(moment: datetime) -> str:
    return _clock(moment) + _format_offset(moment, colon=False)


def format_rfc3339_nano(moment: datetime) -> str:
    text = _clock(moment)
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    return text + _format_offset(moment, colon=True)


GitLabTime = Annotated[datetime, BeforeValidator(parse_gitlab_time)]

BitbucketServerTime = Annotated[
    datetime,
    BeforeValidator(parse_bitbucket_server_time),
    PlainSerializer(format_bitbucket_server_time, return_type=str, when_used="json"),
]

AzureTime = Annotated[
    datetime,
    BeforeValidator(parse_rfc3339),
    PlainSerializer(format_rfc3339_nano, return_type=str, when_used="json"),
]
