"""Tests for the digestify error hierarchy."""

from __future__ import annotations

import json

import pytest

from digestify.errors import (
    DigestifyEncodingError,
    DigestifyError,
    DigestifyInputTypeError,
    ErrorCode,
)


class TestErrorCode:
    def test_values_match_names(self):
        for code in ErrorCode:
            assert code.value == code.name

    def test_serialises_to_json(self):
        assert json.dumps({"code": ErrorCode.ENCODING_ERROR}) == '{"code": "ENCODING_ERROR"}'


class TestDigestifyError:
    def test_attributes(self):
        err = DigestifyError("CUSTOM", "boom", context={"k": 1})
        assert err.code == "CUSTOM"
        assert err.message == "boom"
        assert err.context == {"k": 1}
        assert err.cause is None
        assert str(err) == "boom"

    def test_context_defaults_to_empty_dict(self):
        assert DigestifyError("CUSTOM", "boom").context == {}

    def test_cause_chained(self):
        cause = UnicodeError("inner")
        err = DigestifyError("CUSTOM", "outer", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_repr_with_context(self):
        err = DigestifyError("CUSTOM", "boom", context={"k": 1})
        assert repr(err) == "DigestifyError(code='CUSTOM', message='boom', context={'k': 1})"

    def test_repr_without_context(self):
        assert repr(DigestifyError("CUSTOM", "boom")) == (
            "DigestifyError(code='CUSTOM', message='boom')"
        )


class TestSubclasses:
    def test_encoding_error_code(self):
        err = DigestifyEncodingError("bad bytes")
        assert err.code == ErrorCode.ENCODING_ERROR
        assert isinstance(err, DigestifyError)

    def test_input_type_error_code(self):
        err = DigestifyInputTypeError("not text", context={"received": "bytes"})
        assert err.code == ErrorCode.INPUT_TYPE_ERROR
        assert err.context == {"received": "bytes"}

    def test_input_type_error_caught_as_encoding_error(self):
        with pytest.raises(DigestifyEncodingError):
            raise DigestifyInputTypeError("not text")
