"""Tests for content and resource contents."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from mcpwire.schema.content import (
    AnyResourceContents,
    BlobResourceContents,
    ImageContent,
    SamplingMessage,
    TextContent,
    TextResourceContents,
)
from mcpwire.schema.resources import ReadResourceResult

_contents = TypeAdapter(AnyResourceContents)


class TestContent:
    def test_text(self) -> None:
        msg = SamplingMessage.model_validate({"role": "user", "content": {"type": "text", "text": "hi"}})
        assert isinstance(msg.content, TextContent)

    def test_image(self) -> None:
        msg = SamplingMessage.model_validate(
            {"role": "assistant", "content": {"type": "image", "data": "aGk=", "mimeType": "image/png"}}
        )
        assert isinstance(msg.content, ImageContent)
        assert msg.content.mime_type == "image/png"

    def test_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            SamplingMessage.model_validate({"role": "user", "content": {"type": "audio", "data": "x"}})

    def test_bad_role(self) -> None:
        with pytest.raises(ValidationError):
            SamplingMessage.model_validate({"role": "system", "content": {"type": "text", "text": "x"}})


class TestResourceContents:
    def test_text(self) -> None:
        value = _contents.validate_python({"uri": "file:///a.txt", "text": "hello"})
        assert isinstance(value, TextResourceContents)

    def test_blob(self) -> None:
        value = _contents.validate_python({"uri": "file:///a.bin", "blob": "AAE=", "mimeType": "application/x"})
        assert isinstance(value, BlobResourceContents)
        assert value.mime_type == "application/x"

    def test_both_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exactly one of 'text' or 'blob'"):
            _contents.validate_python({"uri": "file:///a", "text": "x", "blob": "eA=="})

    def test_neither_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exactly one of 'text' or 'blob'"):
            _contents.validate_python({"uri": "file:///a"})

    def test_relative_uri_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not an absolute URI"):
            _contents.validate_python({"uri": "a.txt", "text": "x"})

    def test_in_read_result(self) -> None:
        result = ReadResourceResult.model_validate(
            {"contents": [{"uri": "file:///a", "text": "x"}, {"uri": "file:///b", "blob": "eA=="}]}
        )
        assert [type(c) for c in result.contents] == [TextResourceContents, BlobResourceContents]
