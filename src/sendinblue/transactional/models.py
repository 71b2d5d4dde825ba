"""
Wire models for the transactional email endpoint.
"""

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sendinblue.mailer import Mailer

if TYPE_CHECKING:
    from sendinblue.transactional.builder import TransactionalBodyBuilder


class TransactionalBody(BaseModel):
    """Body of ``POST /smtp/email``.

    Fields serialize with camelCase names (``replyTo``, ``templateId``).
    ``params`` always holds a JSON object of template variables.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    sender: Mailer = Field(default_factory=Mailer)
    to: list[Mailer] = Field(default_factory=list)
    reply_to: Mailer = Field(default_factory=Mailer)
    template_id: int = Field(default=0, ge=0)
    subject: str = ""
    params: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def builder(cls) -> "TransactionalBodyBuilder":
        from sendinblue.transactional.builder import TransactionalBodyBuilder

        return TransactionalBodyBuilder(cls())

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class TransactionalResponse(BaseModel):
    """Provider reply to an accepted send."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message_id: str
