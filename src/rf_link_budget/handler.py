"""Single request/response cycle for the link budget CGI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping
import logging

from .config import SessionConfig
from .cookies import format_set_cookie, get_cookie
from .link_budget import calculate
from .render import format_dbm, render_error, render_result
from .session import SessionStore, is_valid_identifier
from .validation import ValidationFailure, validate_inputs

LAST_CALCULATION_KEY = "last_calculation"
CONTENT_TYPE = "text/html; charset=utf-8"


@dataclass
class Response:
    """HTTP-style CGI response."""

    body: str
    headers: list[tuple[str, str]] = field(default_factory=lambda: [("Content-Type", CONTENT_TYPE)])

    def header(self, name: str) -> str | None:
        for key, value in self.headers:
            if key.lower() == name.lower():
                return value
        return None

    def to_cgi(self) -> str:
        lines = [f"{key}: {value}\r\n" for key, value in self.headers]
        return "".join(lines) + "\r\n" + self.body


def handle_request(
    form: Mapping[str, str],
    cookie_header: str | None,
    store: SessionStore,
    config: SessionConfig | None = None,
    logger: logging.Logger | None = None,
) -> Response:
    """Validate the form, compute received power and record it in the session."""

    config = config or SessionConfig()
    logger = logger or logging.getLogger(__name__)

    incoming = get_cookie(cookie_header, config.cookie_name)
    session = store.open(incoming or None)
    response = Response(body="")
    if not incoming or not is_valid_identifier(incoming) or session.is_expired():
        response.headers.append(
            (
                "Set-Cookie",
                format_set_cookie(
                    config.cookie_name,
                    session.id,
                    secure=config.secure_cookie,
                    http_only=config.http_only_cookie,
                ),
            )
        )

    inputs = validate_inputs(form)
    if isinstance(inputs, ValidationFailure):
        logger.error(
            "calculation_failed",
            extra={"kind": inputs.kind.value, "field": inputs.field, "detail": inputs.message},
        )
        response.body = render_error(inputs.message)
        return response

    received_power = calculate(inputs)
    previous = session.get(LAST_CALCULATION_KEY)
    session.set(LAST_CALCULATION_KEY, format_dbm(received_power))
    logger.info(
        "calculation_performed",
        extra={"received_power_dbm": received_power, "session_id": session.id},
    )
    response.body = render_result(received_power, previous)
    return response
