"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from mp_caml.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mp_caml.kernel.errors import ApplicationError, BaseError, DomainError, ValidationError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "caml_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_is_chained(self) -> None:
        cause = ValueError("original")
        assert BaseError("wrapper", cause=cause).__cause__ is cause

    def test_str_shows_code_and_message(self) -> None:
        assert str(BaseError("boom", code="x")) == "[x] boom"

    def test_log_fields_flatten_detail(self) -> None:
        err = BaseError("bad input", code="x", detail={"env_key": "CAML_LOG_LEVEL"})
        assert err.log_fields() == {"error_code": "x", "error": "bad input", "env_key": "CAML_LOG_LEVEL"}

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        BaseError("m", detail=detail).detail["k"] = 2
        assert detail == {"k": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("boom")) == "BaseError(code='caml_error', message='boom')"


class TestValidationError:
    def test_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)
        assert issubclass(DomainError, BaseError)

    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []

    def test_errors_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"path": "filters.0.operator", "message": "is required"}])
        assert err.to_dict()["errors"] == [{"path": "filters.0.operator", "message": "is required"}]
        assert err.paths == ["filters.0.operator"]
        assert err.code == "validation_error"


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("CAML_PAGE_URL")
        assert err.env_key == "CAML_PAGE_URL"
        assert err.detail == {"env_key": "CAML_PAGE_URL"}
        assert "CAML_PAGE_URL" in err.message

    def test_invalid_setting(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "unknown level")
        assert err.value == "LOUD"
        assert err.env_key is None
        assert err.message.startswith("log_level='LOUD'")
        assert err.code == "invalid_setting_value"
        with pytest.raises(ConfigError):
            raise err

    def test_invalid_setting_names_env_key(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "unknown level", env_key="CAML_LOG_LEVEL")
        assert err.setting_name == "log_level"
        assert err.env_key == "CAML_LOG_LEVEL"
        assert err.message.startswith("CAML_LOG_LEVEL='LOUD'")
        assert err.log_fields()["env_key"] == "CAML_LOG_LEVEL"

    def test_generic_config_error_has_no_env_key(self) -> None:
        err = ConfigError("Failed to load settings")
        assert err.env_key is None
        assert "env_key" not in err.detail
