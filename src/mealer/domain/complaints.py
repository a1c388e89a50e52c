"""Complaint model and its persisted document shape.

A complaint is created client-side without an ``id``; the document store
assigns one when the complaint is persisted.  The id is never part of the
stored field map: the store key is the id.  The persisted document uses
camelCase keys::

    {"title": ..., "description": ..., "clientId": ..., "chefId": ...,
     "dateSubmitted": "YYYY-MM-DD"}

Decoding is explicit: :meth:`Complaint.from_document` coerces every value
to a string, then parses the structured fields, raising
:class:`ComplaintDecodeError` on malformed input.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ComplaintDecodeError(ValueError):
    """A persisted complaint document could not be decoded."""

    def __init__(self, document_id: str | None, detail: str) -> None:
        self.document_id = document_id
        self.detail = detail
        super().__init__(f"Error decoding complaint {document_id or '<unknown>'}: {detail}")


class Complaint(BaseModel):
    """A support record tying a client and a chef to a grievance."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str | None = None
    title: str
    description: str
    client_id: str = Field(alias="clientId")
    chef_id: str = Field(alias="chefId")
    date_submitted: date = Field(alias="dateSubmitted")

    @field_validator("date_submitted", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            return date.fromisoformat(value.strip())
        return value

    def to_document(self) -> dict[str, Any]:
        """Return the field map submitted to the document store."""
        return self.model_dump(by_alias=True, mode="json", exclude={"id"}, exclude_none=True)

    @classmethod
    def from_document(
        cls,
        data: Mapping[str, Any],
        *,
        document_id: str | None = None,
    ) -> Complaint:
        """Decode a stored document into a Complaint.

        The store key *document_id* is the complaint id; a stale ``id``
        field inside the stored data is ignored when a key is given.
        """
        fields: dict[str, Any] = stringify_values(data)
        if document_id is not None:
            fields["id"] = document_id
        try:
            return cls.model_validate(fields)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise ComplaintDecodeError(fields.get("id"), problems) from exc


def stringify_values(data: Mapping[str, Any]) -> dict[str, str]:
    """Coerce every non-null value in *data* to ``str``.

    Examples:
        >>> stringify_values({"a": 1, "b": None, "c": "x"})
        {'a': '1', 'c': 'x'}
    """
    return {key: str(value) for key, value in data.items() if value is not None}
