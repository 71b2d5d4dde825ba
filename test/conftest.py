"""
Pytest configuration and shared fixtures.
"""

import pytest

from sendinblue.mailer import Mailer


@pytest.fixture
def sender() -> Mailer:
    return Mailer(name="sender_name", email="sender_email")


@pytest.fixture
def receiver() -> Mailer:
    return Mailer(name="receiver_name", email="receiver_email")


@pytest.fixture(autouse=True)
def clean_sendinblue_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings-driven tests."""
    for name in (
        "SENDINBLUE_API_KEY",
        "SENDINBLUE_SERVER_URL",
        "SENDINBLUE_TIMEOUT_SECONDS",
        "SENDINBLUE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
