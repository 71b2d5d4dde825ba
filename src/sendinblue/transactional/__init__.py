"""
Transactional email: request body, builder and response.
"""

from sendinblue.transactional.builder import TransactionalBodyBuilder
from sendinblue.transactional.models import TransactionalBody, TransactionalResponse

__all__ = [
    "TransactionalBody",
    "TransactionalBodyBuilder",
    "TransactionalResponse",
]
