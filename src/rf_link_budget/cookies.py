"""Cookie header helpers."""

from __future__ import annotations


def get_cookie(header: str | None, name: str) -> str:
    """Return the value of cookie ``name`` from a ``Cookie`` header, or ``""``."""

    if not header:
        return ""
    for part in header.split(";"):
        key, sep, value = part.strip().partition("=")
        if sep and key == name:
            return value
    return ""


def format_set_cookie(name: str, value: str, secure: bool = True, http_only: bool = True) -> str:
    """Build a ``Set-Cookie`` header value with the requested attributes."""

    attributes = [f"{name}={value}"]
    if http_only:
        attributes.append("HttpOnly")
    if secure:
        attributes.append("Secure")
    return "; ".join(attributes)
