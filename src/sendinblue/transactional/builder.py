"""
Fluent builder for transactional email bodies.

Every step hands the body over to a new builder and retires the old one, so
a chain never shares mutable state with earlier links:

    body = (
        TransactionalBody.builder()
        .set_sender(Mailer(name="Shop", email="shop@example.com"))
        .add_to_mailer(Mailer(name="Ann", email="ann@example.com"))
        .template_id(36)
        .add_values(order)
        .create()
    )
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from sendinblue.errors import BuilderConsumedError
from sendinblue.mailer import Mailer
from sendinblue.transactional.models import TransactionalBody


class TransactionalBodyBuilder:
    """Step-by-step construction of a ``TransactionalBody``."""

    def __init__(self, body: TransactionalBody | None = None) -> None:
        self._body: TransactionalBody | None = body if body is not None else TransactionalBody()

    def _take(self) -> TransactionalBody:
        if self._body is None:
            raise BuilderConsumedError("builder already consumed; continue from the returned builder")
        body, self._body = self._body, None
        return body

    def _assign(self, field: str, value: Any) -> "TransactionalBodyBuilder":
        body = self._take()
        try:
            setattr(body, field, value)
        except ValidationError:
            # rejected input leaves the body untouched and with this builder
            self._body = body
            raise
        return TransactionalBodyBuilder(body)

    def set_sender(self, mailer: Mailer) -> "TransactionalBodyBuilder":
        return self._assign("sender", mailer)

    def add_to_mailer(self, mailer: Mailer) -> "TransactionalBodyBuilder":
        body = self._take()
        try:
            body.to = [*body.to, mailer]
        except ValidationError:
            self._body = body
            raise
        return TransactionalBodyBuilder(body)

    def reply_to(self, mailer: Mailer) -> "TransactionalBodyBuilder":
        return self._assign("reply_to", mailer)

    def template_id(self, template_id: int) -> "TransactionalBodyBuilder":
        """Set the template id.

        Raises:
            ValidationError: If ``template_id`` is not a non-negative integer.
        """
        return self._assign("template_id", template_id)

    def subject(self, subject: str) -> "TransactionalBodyBuilder":
        return self._assign("subject", subject)

    def add_params(self, key: str, value: str) -> "TransactionalBodyBuilder":
        """Set one string template variable, replacing any previous value.

        Non-string values are stored as their ``str()`` form.

        Raises:
            TypeError: If ``value`` is ``None``.
        """
        if value is None:
            raise TypeError(f"params[{key!r}] value must not be None")
        body = self._take()
        body.params[key] = str(value)
        return TransactionalBodyBuilder(body)

    def add_params_array(self, key: str, values: Iterable[Any]) -> "TransactionalBodyBuilder":
        """Store ``values`` as a JSON array under ``key``.

        Items may be plain JSON values, pydantic models, dataclasses or
        anything else pydantic can serialize.

        Raises:
            TypeError: If ``values`` is a string or a mapping, or an item
                cannot be converted to JSON.
        """
        if isinstance(values, (str, bytes, bytearray, Mapping)):
            raise TypeError(f"params[{key!r}] expects a sequence of values, got {type(values).__name__}")
        try:
            array = to_jsonable_python(list(values))
        except PydanticSerializationError as e:
            raise TypeError(f"params[{key!r}] is not JSON serializable: {e}") from e

        body = self._take()
        body.params[key] = array
        return TransactionalBodyBuilder(body)

    def add_values(self, values: Any) -> "TransactionalBodyBuilder":
        """Merge the top-level keys of a JSON object into the params.

        ``values`` may be a mapping, a pydantic model or a dataclass. Keys
        whose value is ``None`` are skipped; every other value is copied
        unchanged, nested arrays and objects included. Keys already present
        are overwritten, the rest are kept.

        Raises:
            TypeError: If ``values`` does not convert to a JSON object.
        """
        try:
            obj = to_jsonable_python(values)
        except PydanticSerializationError as e:
            raise TypeError(f"values are not JSON serializable: {e}") from e
        if not isinstance(obj, dict):
            raise TypeError(f"values must be a JSON object, got {type(obj).__name__}")

        body = self._take()
        for key, value in obj.items():
            if value is None:
                continue
            body.params[str(key)] = value
        return TransactionalBodyBuilder(body)

    def create(self) -> TransactionalBody:
        """Return the finished body. The builder cannot be used afterwards."""
        return self._take()
