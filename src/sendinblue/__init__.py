"""
Async client for the Sendinblue transactional email API.
"""

from sendinblue.client import Sendinblue
from sendinblue.config import BASE_URL, SendinblueSettings, get_settings
from sendinblue.errors import BuilderConsumedError, ConfigurationError, SendinblueError
from sendinblue.mailer import Mailer
from sendinblue.transactional import (
    TransactionalBody,
    TransactionalBodyBuilder,
    TransactionalResponse,
)

__all__ = [
    "BASE_URL",
    "BuilderConsumedError",
    "ConfigurationError",
    "Mailer",
    "Sendinblue",
    "SendinblueError",
    "SendinblueSettings",
    "TransactionalBody",
    "TransactionalBodyBuilder",
    "TransactionalResponse",
    "get_settings",
]
