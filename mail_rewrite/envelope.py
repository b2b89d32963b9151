"""Apply the rewrite policy to a standard-library ``email`` message.

Only the From, Reply-To and Return-Path headers are read and written; the
body and every other header are left alone.
"""

from __future__ import annotations

import email.message

from .config import SiteMailConfig
from .models import REPLY_TO, RETURN_PATH, OutgoingMessage
from .rewriter import HeaderRewriter

_MANAGED_HEADERS = (REPLY_TO, RETURN_PATH)


def rewrite_email_message(
    msg: email.message.Message,
    config: SiteMailConfig,
    rewriter: HeaderRewriter | None = None,
) -> None:
    """Rewrite the envelope headers of *msg* in place."""
    from_value = msg.get("From")
    if from_value is None:
        return

    outgoing = OutgoingMessage(
        from_address=str(from_value),
        headers={name: str(msg[name]) for name in _MANAGED_HEADERS if name in msg},
    )
    (rewriter or HeaderRewriter()).rewrite(outgoing, config)

    _replace_header(msg, "From", outgoing.from_address)
    for name in _MANAGED_HEADERS:
        _replace_header(msg, name, outgoing.headers.get(name))


def _replace_header(msg: email.message.Message, name: str, value: str | None) -> None:
    if msg.get(name) == value:
        return
    del msg[name]
    if value is not None:
        msg[name] = value
