"""
Named email address used for sender, reply-to and recipients.
"""

from pydantic import BaseModel


class Mailer(BaseModel):
    """A (display name, email address) pair.

    The address is sent as given, no format check is done locally.
    """

    name: str = ""
    email: str = ""

    model_config = {"frozen": True}

    @classmethod
    def new(cls, name: str, email: str) -> "Mailer":
        """Positional shorthand for ``Mailer(name=..., email=...)``."""
        return cls(name=name, email=email)
