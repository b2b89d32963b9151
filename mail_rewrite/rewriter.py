"""HeaderRewriter — enforce the site mail domain on outgoing From headers.

The first mailbox of the From field (the *primary* address) decides the
policy for the whole message:

* outside the mail domain: it is replaced by the site address and kept
  reachable through Reply-To;
* inside the mail domain: From stays as it is, the site-wide Reply-To is
  added when sending as the site address, and Return-Path is forced into
  the mail domain.

A Reply-To supplied by the caller is never overwritten.
"""

from __future__ import annotations

import structlog

from .addresses import AddressListParser, bare_address
from .config import SiteMailConfig
from .models import REPLY_TO, RETURN_PATH, OutgoingMessage

logger = structlog.get_logger()


class HeaderRewriter:
    """Apply the site mail policy to outgoing messages, one call per message."""

    def __init__(self, parser: AddressListParser | None = None) -> None:
        self._parser = parser or AddressListParser()

    def rewrite(self, message: OutgoingMessage, config: SiteMailConfig) -> None:
        """Rewrite *message* in place according to *config*."""
        entries = self._parser.parse(message.from_address)
        if not entries:
            logger.debug("from_address_unparsable", from_address=message.from_address)
            return

        primary = entries[0]
        primary_addr = bare_address(primary)

        if config.in_domain(primary_addr):
            self._apply_site_reply_to(message, config, primary_addr)
            self._apply_return_path(message, config)
        else:
            if not config.mail:
                logger.warning("site_mail_missing", from_address=primary)
                return
            entries[0] = config.mail
            logger.info(
                "from_address_substituted",
                original=primary,
                replacement=config.mail,
            )
            self._set_reply_to(message, primary, reason="from_substituted")

        message.from_address = ",".join(entries)

    # ------------------------------------------------------------------
    # Reply-To
    # ------------------------------------------------------------------

    def _apply_site_reply_to(
        self, message: OutgoingMessage, config: SiteMailConfig, primary_addr: str
    ) -> None:
        if primary_addr == config.mail and config.replyto_mail:
            self._set_reply_to(message, config.replyto_mail, reason="site_reply_to")

    def _set_reply_to(self, message: OutgoingMessage, value: str, *, reason: str) -> None:
        if REPLY_TO in message.headers:
            return
        message.headers[REPLY_TO] = value
        logger.debug("reply_to_set", reply_to=value, reason=reason)

    # ------------------------------------------------------------------
    # Return-Path
    # ------------------------------------------------------------------

    def _apply_return_path(self, message: OutgoingMessage, config: SiteMailConfig) -> None:
        supplied = message.headers.get(RETURN_PATH)
        default = config.return_path

        for candidate in (supplied, default):
            if candidate and config.in_domain(bare_address(candidate)):
                message.headers[RETURN_PATH] = candidate
                logger.debug("return_path_set", return_path=candidate)
                return

        if RETURN_PATH in message.headers:
            del message.headers[RETURN_PATH]
            logger.debug("return_path_removed", return_path=supplied)


def rewrite(message: OutgoingMessage, config: SiteMailConfig) -> None:
    """Rewrite *message* in place with a default :class:`HeaderRewriter`."""
    HeaderRewriter().rewrite(message, config)
