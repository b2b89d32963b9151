"""Entry point for the mail rewrite package.

Usage::

    python -m mail_rewrite message.eml   # rewrite a message file
    python -m mail_rewrite < message.eml # rewrite stdin

The site policy is read from ``SITE_*`` environment variables; the
rewritten message is written to stdout.
"""

from __future__ import annotations

import email.parser
import sys

import structlog
from pydantic import ValidationError

USAGE = "Usage: python -m mail_rewrite [PATH|-]"


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1 or (args and args[0] in ("-h", "--help")):
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    from .config import LoggingConfig, SiteMailConfig
    from .envelope import rewrite_email_message
    from .logging import setup_logging

    try:
        log_config = LoggingConfig()
        config = SiteMailConfig()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    setup_logging(json=log_config.json_output, level=log_config.level, stream=sys.stderr)
    logger = structlog.get_logger()

    path = args[0] if args else "-"
    try:
        if path == "-":
            raw = sys.stdin.buffer.read()
        else:
            with open(path, "rb") as fh:
                raw = fh.read()
    except OSError as exc:
        print(f"Cannot read {path}: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    msg = email.parser.BytesParser().parsebytes(raw)
    rewrite_email_message(msg, config)
    logger.info("message_rewritten", source=path, from_address=msg.get("From", ""))

    sys.stdout.buffer.write(msg.as_bytes())
    sys.stdout.buffer.flush()


if __name__ == "__main__":
    main()
