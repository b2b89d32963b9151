"""Data model for a message handed over by the host mail pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

REPLY_TO = "Reply-To"
RETURN_PATH = "Return-Path"


@dataclass
class OutgoingMessage:
    """An outgoing message as seen by the rewrite hook.

    Attributes:
        from_address: Raw From value, possibly several comma-separated mailboxes
        headers: Additional headers keyed by name, as used by the host
    """

    from_address: str
    headers: dict[str, str] = field(default_factory=dict)
