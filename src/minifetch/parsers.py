"""Pure parsers for the text resources minifetch reads.

Every function here takes already-read text (or a plain value) and either
returns the extracted fact or raises a ``FetchError`` subclass. None of them
touch the filesystem or the environment.
"""

import math
import re

from minifetch.errors import NotFoundError, ParseError
from minifetch.models import MemoryStats

PRETTY_NAME_KEY = "PRETTY_NAME"
MEM_TOTAL_LABEL = "MemTotal"
MEM_AVAILABLE_LABEL = "MemAvailable"

_WHITESPACE = re.compile(r"\s")


def parse_os_release(text: str) -> str:
    """
    Extract the human-readable OS name from os-release content.

    Lines are scanned in order and must all be ``KEY=VALUE``; a malformed line
    seen before ``PRETTY_NAME`` aborts the parse.

    Args:
        text: Content of an os-release file.

    Returns:
        The ``PRETTY_NAME`` value with surrounding double quotes removed.
    """
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            raise ParseError(f"Malformed os-release line: {line!r}")
        if key == PRETTY_NAME_KEY:
            return value.strip('"')

    raise NotFoundError("No PRETTY_NAME found in release file")


def _parse_kib(label: str, value: str) -> int:
    try:
        return int(value.replace("kB", "").strip())
    except ValueError as exc:
        raise ParseError(f"Bad {label} value: {value!r}") from exc


def parse_meminfo(text: str) -> MemoryStats:
    """
    Extract MemTotal and MemAvailable from meminfo content.

    Scanning stops as soon as both fields are known, so anything after them is
    never validated.

    Args:
        text: Content of /proc/meminfo.

    Returns:
        MemoryStats with both values in KiB.
    """
    total = available = None

    for line in text.splitlines():
        label, sep, value = line.strip().partition(":")
        if not sep:
            raise ParseError(f"Malformed meminfo line: {line!r}")

        label = label.strip()
        if label == MEM_TOTAL_LABEL:
            total = _parse_kib(label, value)
        elif label == MEM_AVAILABLE_LABEL:
            available = _parse_kib(label, value)

        if total is not None and available is not None:
            break

    if total is None:
        raise NotFoundError(f"No {MEM_TOTAL_LABEL} found in meminfo")
    if available is None:
        raise NotFoundError(f"No {MEM_AVAILABLE_LABEL} found in meminfo")

    return MemoryStats(total_kib=total, available_kib=available)


def parse_uptime_seconds(text: str) -> float:
    """Parse the leading seconds value of /proc/uptime content."""
    parts = _WHITESPACE.split(text, maxsplit=1)
    if len(parts) < 2:
        raise ParseError(f"Can't get uptime data from {text!r}")

    try:
        seconds = float(parts[0])
    except ValueError as exc:
        raise ParseError(f"Bad uptime value: {parts[0]!r}") from exc

    if not math.isfinite(seconds):
        raise ParseError(f"Bad uptime value: {parts[0]!r}")
    return seconds


def _plural(count: float, unit: str) -> str:
    return unit if count < 2 else f"{unit}s"


def format_uptime(seconds: float) -> str:
    """
    Format elapsed seconds as a short human duration.

    Under a minute this is ``"45 Seconds"``. Otherwise hours and minutes are
    shown when each is at least one, e.g. ``"1 Hour 2 Minutes"``,
    ``"3 Hours "`` or ``"1 Minute"``.
    """
    if seconds < 60:
        return f"{math.floor(seconds)} Seconds"

    total_minutes = seconds / 60
    total_hours = total_minutes / 60
    mins = total_minutes % 60

    result = ""
    if total_hours >= 1:
        result += f"{math.floor(total_hours)} {_plural(total_hours, 'Hour')} "
    if mins >= 1:
        result += f"{math.floor(mins)} {_plural(mins, 'Minute')}"

    return result


def parse_uptime(text: str) -> str:
    """Parse /proc/uptime content straight to a display string."""
    return format_uptime(parse_uptime_seconds(text))


def shell_name(path: str) -> str:
    """Get the executable name from a shell path, e.g. ``/usr/bin/bash`` -> ``bash``."""
    name = path.split("/")[-1]
    if not name:
        raise NotFoundError(f"Cannot get the shell name from {path!r}")
    return name


def user_line(user: str, node_name: str) -> str:
    """Build the ``user@host`` header."""
    return f"{user}@{node_name}"
