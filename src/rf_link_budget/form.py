"""CGI form input parsing."""

from __future__ import annotations

import re
from typing import TextIO
from urllib.parse import unquote_plus

_PAIR = re.compile(r"([^&=]+)=([^&]*)")


def parse_form(line: str) -> dict[str, str]:
    """Parse one ``key=value&key=value`` line; a repeated key keeps its last value."""

    data: dict[str, str] = {}
    for match in _PAIR.finditer(line.rstrip("\r\n")):
        data[unquote_plus(match.group(1))] = unquote_plus(match.group(2))
    return data


def read_form(stream: TextIO) -> dict[str, str]:
    """Read exactly one line of form data from ``stream``."""

    return parse_form(stream.readline())
