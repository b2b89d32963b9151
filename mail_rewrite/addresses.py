"""Address-list scanner for the From field of outgoing mail.

Splits a raw header value into individual mailboxes without walking it
through a full RFC 2822 grammar: commas separate entries unless they sit
inside a quoted display name or an angle-bracket address.  Fragments that
do not look like a mailbox are dropped rather than reported.
"""

from __future__ import annotations

import email.utils
import re

# Local part, "@", dotted domain ending in an alphabetic label of 2+ chars.
_ADDRESS_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}", re.ASCII)

# The same shape standing alone inside surrounding text.
_ADDRESS_TOKEN_RE = re.compile(
    r"(?<![^\s<>()\"])" + _ADDRESS_RE.pattern + r"(?![^\s<>()\"])", re.ASCII
)


def is_plain_address(value: str) -> bool:
    """Return True if *value* is a bare ``user@domain`` address."""
    return _ADDRESS_RE.fullmatch(value) is not None


def bare_address(mailbox: str) -> str:
    """Return the address part of *mailbox*, without display name or brackets."""
    if not mailbox:
        return ""
    _, addr = email.utils.parseaddr(mailbox)
    return addr


class AddressListParser:
    """Stateless parser: raw From value → ordered list of mailbox strings."""

    def parse(self, raw: str) -> list[str]:
        entries: list[str] = []
        for segment in self._split(raw or ""):
            mailbox = self._match_mailbox(segment.strip())
            if mailbox:
                entries.append(mailbox)
        return entries

    def _split(self, raw: str) -> list[str]:
        """Cut *raw* at commas outside quotes and angle brackets."""
        # A trailing unpaired quote is plain text, otherwise it would hide
        # every comma after it.
        stray_quote = raw.rfind('"') if raw.count('"') % 2 else -1

        segments: list[str] = []
        start = 0
        in_quotes = False
        depth = 0
        for i, char in enumerate(raw):
            if char == '"' and i != stray_quote:
                in_quotes = not in_quotes
            elif in_quotes:
                continue
            elif char == "<":
                depth += 1
            elif char == ">" and depth:
                depth -= 1
            elif char == "," and not depth:
                segments.append(raw[start:i])
                start = i + 1
        segments.append(raw[start:])
        return segments

    def _match_mailbox(self, segment: str) -> str | None:
        """Return the mailbox recognised in *segment*, or None."""
        if not segment:
            return None

        open_bracket = segment.rfind("<")
        if (
            not segment.endswith(">")
            or open_bracket < 0
            or not is_plain_address(segment[open_bracket + 1 : -1])
        ):
            # Fall back to an address standing alone among other text,
            # e.g. "user@example.com (Comment)" or "Name user@example.com".
            match = _ADDRESS_TOKEN_RE.search(segment)
            return match.group() if match else None

        bracketed = segment[open_bracket:]
        name = segment[:open_bracket].rstrip()
        if len(name) >= 2 and name.endswith('"'):
            open_quote = name.rfind('"', 0, -1)
            if open_quote >= 0:
                return segment[open_quote:]
        return bracketed
