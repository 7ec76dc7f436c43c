"""Tests for the exception hierarchy and status mapping."""

import pytest

from neo_catalog.core.exceptions import (
    CacheError,
    CacheNotInitializedError,
    ConfigurationError,
    DateParseError,
    EntityNotFoundError,
    HttpStatusMapper,
    InvalidArgumentError,
    NeoCatalogError,
    ResourceNotFoundError,
    create_error_response,
    get_http_status_code,
)


class TestExceptions:

    def test_error_code_defaults_to_class_name(self):
        error = CacheError("boom")

        assert error.error_code == "CacheError"
        assert error.details == {}
        assert str(error) == "boom"

    def test_entity_not_found(self):
        error = EntityNotFoundError("tag", "PII.Sensitive", reason="not_found")

        assert str(error) == "tag instance for PII.Sensitive not found"
        assert isinstance(error, ResourceNotFoundError)
        assert error.entity_type == "tag"
        assert error.name == "PII.Sensitive"
        assert error.error_code == "ENTITY_NOT_FOUND"
        assert error.details == {"entity_type": "tag", "name": "PII.Sensitive", "reason": "not_found"}

    def test_date_parse_error(self):
        error = DateParseError("yesterday", "%Y-%m-%d")

        assert error.value == "yesterday"
        assert error.error_code == "DATE_PARSE_ERROR"
        assert "yesterday" in error.message

    def test_create_error_response(self):
        response = create_error_response(InvalidArgumentError("bad", argument="source", value=3))

        assert response == {
            "error": {
                "code": "INVALID_ARGUMENT",
                "message": "bad",
                "details": {"argument": "source", "value": "3"},
                "type": "InvalidArgumentError",
            }
        }


class TestHttpStatusMapping:

    @pytest.mark.parametrize("error,status", [
        (InvalidArgumentError("bad"), 400),
        (DateParseError("x", "%Y"), 400),
        (EntityNotFoundError("tag", "x"), 404),
        (ConfigurationError("missing"), 500),
        (CacheNotInitializedError("not ready"), 503),
        (NeoCatalogError("generic"), 500),
        (RuntimeError("other"), 500),
    ])
    def test_default_mapping(self, error, status):
        assert get_http_status_code(error) == status

    def test_override_by_class_name_applies_to_subclasses(self):
        mapper = HttpStatusMapper(overrides={"ResourceNotFoundError": 410})

        assert mapper.get_status_code(EntityNotFoundError("tag", "x")) == 410
        assert mapper.get_status_code(InvalidArgumentError("bad")) == 400

    def test_base_class_override_beats_static_subclass_entry(self):
        mapper = HttpStatusMapper(overrides={"NeoCatalogError": 418})

        assert mapper.get_status_code(EntityNotFoundError("tag", "x")) == 418
        assert mapper.get_status_code(CacheNotInitializedError("not ready")) == 418
        assert mapper.get_status_code(RuntimeError("other")) == 500

    def test_nearest_override_wins(self):
        mapper = HttpStatusMapper(overrides={"NeoCatalogError": 418, "EntityNotFoundError": 410})

        assert mapper.get_status_code(EntityNotFoundError("tag", "x")) == 410
        assert mapper.get_status_code(ConfigurationError("missing")) == 418
