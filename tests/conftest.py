"""Shared test fixtures for the mail rewrite test suite."""

from __future__ import annotations

import logging
from email.mime.text import MIMEText

import pytest
import structlog

from mail_rewrite.addresses import AddressListParser
from mail_rewrite.config import SiteMailConfig
from mail_rewrite.models import OutgoingMessage
from mail_rewrite.rewriter import HeaderRewriter


@pytest.fixture(autouse=True)
def _clean_site_env(monkeypatch):
    """Keep SITE_* / LOG_* variables from the developer's shell out of tests."""
    for name in (
        "SITE_MAIL_DOMAIN",
        "SITE_MAIL",
        "SITE_REPLYTO_MAIL",
        "SITE_MAIL_RETURN_PATH",
        "LOG_LEVEL",
        "LOG_JSON_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging() so later tests do not write to a closed stream."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def site_config() -> SiteMailConfig:
    return SiteMailConfig(
        mail_domain="example.com",
        mail="site@example.com",
        replyto_mail="reply-to@example.com",
    )


@pytest.fixture
def site_config_factory():
    """Factory to create SiteMailConfig instances with overrides."""

    def _make(**overrides) -> SiteMailConfig:
        defaults = dict(
            mail_domain="example.com",
            mail="site@example.com",
            replyto_mail="reply-to@example.com",
        )
        defaults.update(overrides)
        return SiteMailConfig(**defaults)

    return _make


@pytest.fixture
def parser() -> AddressListParser:
    return AddressListParser()


@pytest.fixture
def rewriter() -> HeaderRewriter:
    return HeaderRewriter()


@pytest.fixture
def message_factory():
    """Factory to create OutgoingMessage instances."""

    def _make(from_address: str, **headers: str) -> OutgoingMessage:
        return OutgoingMessage(
            from_address=from_address,
            headers={name.replace("_", "-"): value for name, value in headers.items()},
        )

    return _make


def build_email(
    from_addr: str | None = "from@other.com",
    *,
    to_addr: str = "recipient@example.net",
    subject: str = "Test Subject",
    body: str = "Hello, World!",
    **headers: str,
) -> MIMEText:
    """Build a simple text email; extra keyword headers use ``_`` for ``-``."""
    msg = MIMEText(body)
    msg["Subject"] = subject
    if from_addr is not None:
        msg["From"] = from_addr
    msg["To"] = to_addr
    for name, value in headers.items():
        msg[name.replace("_", "-")] = value
    return msg


@pytest.fixture
def email_factory():
    return build_email
