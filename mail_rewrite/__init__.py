"""Mail Rewrite — keep the From of outgoing mail inside the site mail domain."""

from .addresses import AddressListParser, bare_address, is_plain_address
from .config import LoggingConfig, SiteMailConfig
from .envelope import rewrite_email_message
from .logging import setup_logging
from .models import OutgoingMessage
from .rewriter import HeaderRewriter, rewrite

__all__ = [
    "AddressListParser",
    "HeaderRewriter",
    "LoggingConfig",
    "OutgoingMessage",
    "SiteMailConfig",
    "bare_address",
    "is_plain_address",
    "rewrite",
    "rewrite_email_message",
    "setup_logging",
]
