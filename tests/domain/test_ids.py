"""Tests for ID validation and document-id generation."""

import pytest

from mealer.domain.ids import (
    DOCUMENT_ID_LENGTH,
    generate_document_id,
    is_valid_id,
    validate_document_id,
)


class TestIsValidId:
    @pytest.mark.parametrize("value", ["m1", "abc", " "])
    def test_non_empty_strings_are_valid(self, value: str) -> None:
        assert is_valid_id(value)

    @pytest.mark.parametrize("value", ["", None, 42, b"m1"])
    def test_empty_or_non_string_is_invalid(self, value: object) -> None:
        assert not is_valid_id(value)


class TestGenerateDocumentId:
    def test_length_and_alphabet(self) -> None:
        doc_id = generate_document_id()
        assert len(doc_id) == DOCUMENT_ID_LENGTH
        assert doc_id.isalnum()
        assert validate_document_id(doc_id)

    def test_ids_differ(self) -> None:
        ids = {generate_document_id() for _ in range(50)}
        assert len(ids) == 50


class TestValidateDocumentId:
    def test_rejects_wrong_length(self) -> None:
        assert not validate_document_id("abc")

    def test_rejects_punctuation(self) -> None:
        assert not validate_document_id("abcdefghij-klmnopqrs")
