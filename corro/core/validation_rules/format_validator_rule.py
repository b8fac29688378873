import ipaddress
import re
from datetime import date, datetime, time
from typing import Any, Callable

from corro.decorators.rule_decorator import validator_rule

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_URI = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://[^\s/?#]+[^\s]*$")
_HOST_NAME = re.compile(r"^(?=.{1,253}$)(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*$")
_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_UTC_MILLISEC = re.compile(r"^\d+(\.\d+)?$")
_COLOR_NAMES = {
    "aqua", "black", "blue", "fuchsia", "gray", "green", "lime", "maroon",
    "navy", "olive", "orange", "purple", "red", "silver", "teal", "white", "yellow",
}


def _parses(parser: Callable[[str], Any]) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        try:
            parser(value)
        except ValueError:
            return False
        return True

    return check


def _date_time(value: str) -> datetime:
    # fromisoformat before 3.11 rejects a trailing Z
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    if "T" not in value and " " not in value:
        raise ValueError("not a date-time")
    return datetime.fromisoformat(value)


def _color(value: str) -> bool:
    return bool(_HEX_COLOR.match(value)) or value.lower() in _COLOR_NAMES


FORMATS: dict[str, Callable[[str], bool]] = {
    "email": lambda value: bool(_EMAIL.match(value)),
    "uri": lambda value: bool(_URI.match(value)),
    "url": lambda value: bool(_URI.match(value)),
    "date-time": _parses(_date_time),
    "date": _parses(date.fromisoformat),
    "time": _parses(time.fromisoformat),
    "utc-millisec": lambda value: bool(_UTC_MILLISEC.match(value)),
    "color": _color,
    "ip-address": _parses(ipaddress.IPv4Address),
    "ipv4": _parses(ipaddress.IPv4Address),
    "ipv6": _parses(ipaddress.IPv6Address),
    "host-name": lambda value: bool(_HOST_NAME.match(value)),
    "hostname": lambda value: bool(_HOST_NAME.match(value)),
}


@validator_rule("expected format {0}")
def format_(context, value: Any, name: str) -> bool:
    check = FORMATS.get(name)
    if check is None or not isinstance(value, str):
        return False
    return check(value)
