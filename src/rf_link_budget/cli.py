"""CGI entry point: form line on stdin, cookies in HTTP_COOKIE, response on stdout."""

from __future__ import annotations

import argparse
import os
import sys

from .api import build_runtime
from .config import LinkBudgetSettings
from .form import read_form


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute an RF link budget for one CGI request")
    parser.add_argument("--config", help="Path to TOML configuration file")
    args = parser.parse_args(argv)

    settings = LinkBudgetSettings.from_toml(args.config) if args.config else LinkBudgetSettings()
    runtime = build_runtime(settings)
    response = runtime.handle(read_form(sys.stdin), os.environ.get("HTTP_COOKIE"))
    sys.stdout.write(response.to_cgi())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
