"""ID validation and document-id generation.

Meal IDs are chosen by the caller and only need to be non-empty.
Complaint IDs are assigned by the document store on creation, using
the same shape as hosted document stores: 20 alphanumeric characters.

INVARIANT: IDs are permanent. Once assigned, an ID never changes.
"""

from __future__ import annotations

import re
import secrets
import string

DOCUMENT_ID_LENGTH = 20
DOCUMENT_ID_ALPHABET = string.ascii_letters + string.digits
DOCUMENT_ID_PATTERN = re.compile(rf"^[A-Za-z0-9]{{{DOCUMENT_ID_LENGTH}}}$")


def is_valid_id(value: object) -> bool:
    """Return True if *value* is a non-empty string."""
    return isinstance(value, str) and value != ""


def generate_document_id() -> str:
    """Generate a random store-assigned document ID."""
    return "".join(secrets.choice(DOCUMENT_ID_ALPHABET) for _ in range(DOCUMENT_ID_LENGTH))


def validate_document_id(document_id: str) -> bool:
    """Check whether *document_id* looks like a generated document ID."""
    return DOCUMENT_ID_PATTERN.match(document_id) is not None
