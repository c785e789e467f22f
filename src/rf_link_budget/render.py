"""HTML rendering for the result page."""

from __future__ import annotations

from html import escape

TITLE = "RF Link Budget Result"

_HEAD = (
    "<!DOCTYPE html><html lang='en'><head><meta charset='UTF-8'>"
    f"<title>{TITLE}</title>"
    "<style>body { font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; }"
    "h1, h2 { color: #333; } .error { color: red; }</style></head><body>"
)
_FOOT = "<p><a href='/index.html'>Go Back</a></p></body></html>"


def format_dbm(value: float) -> str:
    return f"{value:.2f}"


def render_result(received_power: float, previous: str | None = None) -> str:
    parts = [_HEAD, f"<h1>{TITLE}</h1>", f"<p>Received Power: {format_dbm(received_power)} dBm</p>"]
    if previous is not None:
        parts.append(f"<p>Previous calculation: {escape(previous)} dBm</p>")
    parts.append(_FOOT)
    return "".join(parts)


def render_error(message: str) -> str:
    return "".join([_HEAD, "<h2>Error</h2>", f"<p class='error'>{escape(message)}</p>", _FOOT])
