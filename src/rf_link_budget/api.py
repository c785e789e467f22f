"""Public API facade for the link budget CGI.

This module assembles the configured session store and logger so callers get
a single entry point for serving one request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

import logging
import time

from .config import LinkBudgetSettings
from .handler import Response, handle_request
from .logging_utils import configure_logging
from .session import SessionStore, generate_session_id


@dataclass
class LinkBudgetRuntime:
    """Structured runtime handles for one invocation."""

    settings: LinkBudgetSettings
    store: SessionStore
    logger: logging.Logger

    def handle(self, form: Mapping[str, str], cookie_header: str | None) -> Response:
        return handle_request(
            form,
            cookie_header,
            self.store,
            config=self.settings.session,
            logger=self.logger,
        )


def build_runtime(
    settings: LinkBudgetSettings | None = None,
    logger: logging.Logger | None = None,
    id_factory: Callable[[], str] = generate_session_id,
    clock: Callable[[], float] = time.time,
) -> LinkBudgetRuntime:
    """Create a runtime with logging configured from ``settings``."""

    settings = settings or LinkBudgetSettings()
    if logger is None:
        logger = configure_logging(settings.logging)
    store = SessionStore(
        settings.session.directory,
        expiry_seconds=settings.session.expiry_seconds,
        id_factory=id_factory,
        clock=clock,
        logger=logger,
    )
    return LinkBudgetRuntime(settings=settings, store=store, logger=logger)
