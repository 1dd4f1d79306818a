"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from fcm_push.config.validation import ConfigError, MissingRequiredSettingError
from fcm_push.kernel.errors import (
    ApplicationError,
    AuthError,
    BaseError,
    DomainError,
    FormatError,
    InfrastructureError,
    ParseError,
    SerializationError,
    TransportError,
    UnsupportedTargetError,
)
from fcm_push.messaging import ResponseStatus


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"
        assert err.detail == {}

    def test_str_is_json(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert json.loads(str(err)) == {
            "error": "BaseError",
            "code": "custom",
            "message": "boom",
            "retryable": False,
            "detail": {"k": 1},
        }

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        err = BaseError("boom", detail=detail)
        detail["k"] = 2
        assert err.detail == {"k": 1}

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_repr(self) -> None:
        assert repr(AuthError("nope")) == "AuthError(code='auth_error', message='nope')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent", "code"),
        [
            (AuthError, ApplicationError, "auth_error"),
            (ConfigError, ApplicationError, "config_error"),
            (FormatError, DomainError, "format_error"),
            (SerializationError, InfrastructureError, "serialization_error"),
            (UnsupportedTargetError, SerializationError, "unsupported_target"),
        ],
    )
    def test_default_codes(self, cls: type[BaseError], parent: type[BaseError], code: str) -> None:
        err = cls("x")
        assert isinstance(err, parent)
        assert err.code == code

    def test_transport_error_keeps_url(self) -> None:
        err = TransportError("https://fcm.example/send")
        assert err.url == "https://fcm.example/send"
        assert "fcm.example" in err.message
        assert isinstance(err, InfrastructureError)
        assert err.to_dict()["detail"] == {"url": "https://fcm.example/send"}

    @pytest.mark.parametrize(
        ("err", "retryable"),
        [
            (TransportError("https://fcm.example/send"), True),
            (ParseError("bad body", status=ResponseStatus()), False),
            (AuthError("denied"), False),
            (UnsupportedTargetError("multicast"), False),
            (FormatError("soon"), False),
        ],
    )
    def test_retryable_hint(self, err: BaseError, retryable: bool) -> None:
        assert err.retryable is retryable
        assert err.to_dict()["retryable"] is retryable

    def test_parse_error_carries_status(self) -> None:
        status = ResponseStatus(status_code=200, retry_after="5")
        err = ParseError("bad body", status=status)
        assert err.status is status
        assert err.code == "parse_error"

    def test_format_error_keeps_value(self) -> None:
        assert FormatError("bad", value="soon").value == "soon"

    def test_missing_setting_is_config_error(self) -> None:
        err = MissingRequiredSettingError("project_id")
        assert isinstance(err, ConfigError)
        assert err.setting_name == "project_id"
        assert "project_id" in err.message
        assert err.detail == {"setting": "project_id"}
