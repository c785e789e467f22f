"""Top-level package for the RF link budget CGI."""

from .api import LinkBudgetRuntime, build_runtime
from .config import LinkBudgetSettings, LoggingConfig, SessionConfig
from .cookies import format_set_cookie, get_cookie
from .form import parse_form, read_form
from .handler import Response, handle_request
from .link_budget import calculate, received_power_dbm, round_half_away
from .logging_utils import JsonFormatter, configure_logging
from .models import LinkBudgetInputs, SessionRecord
from .render import render_error, render_result
from .session import Session, SessionStore, generate_session_id
from .validation import (
    FIELD_SPECS,
    FieldSpec,
    ValidationErrorKind,
    ValidationFailure,
    validate,
    validate_inputs,
)

__all__ = [
    "LinkBudgetRuntime",
    "build_runtime",
    "LinkBudgetSettings",
    "LoggingConfig",
    "SessionConfig",
    "format_set_cookie",
    "get_cookie",
    "parse_form",
    "read_form",
    "Response",
    "handle_request",
    "calculate",
    "received_power_dbm",
    "round_half_away",
    "JsonFormatter",
    "configure_logging",
    "LinkBudgetInputs",
    "SessionRecord",
    "render_error",
    "render_result",
    "Session",
    "SessionStore",
    "generate_session_id",
    "FIELD_SPECS",
    "FieldSpec",
    "ValidationErrorKind",
    "ValidationFailure",
    "validate",
    "validate_inputs",
]
