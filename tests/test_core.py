"""
test_core.py - Tests for settings, the error taxonomy and validation messages.
"""

import pytest
from pydantic import ValidationError

from student_api.core.config import Settings
from student_api.core.exceptions import (
    ErrorKind,
    InvalidInputException,
    StorageException,
    StudentNotFoundException,
)
from student_api.core.handlers import describe_validation_errors


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.PORT == 8080
        assert settings.MONGODB_DB == "school"
        assert settings.MONGODB_COLLECTION == "students"

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "9090")
        assert Settings(_env_file=None).PORT == 9090

    def test_rejects_out_of_range_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    def test_masked_mongodb_url_hides_password(self):
        settings = Settings(_env_file=None, MONGODB_URL="mongodb://admin:s3cret@db:27017/school")
        assert settings.get_masked_mongodb_url() == "mongodb://admin:***@db:27017/school"

    def test_masked_mongodb_url_without_credentials(self):
        settings = Settings(_env_file=None, MONGODB_URL="mongodb://db:27017")
        assert settings.get_masked_mongodb_url() == "mongodb://db:27017"


class TestErrorKind:
    @pytest.mark.parametrize("exc, status", [
        (InvalidInputException(), 400),
        (StudentNotFoundException(), 404),
        (StorageException("Failed to insert student"), 500),
    ])
    def test_status_codes(self, exc, status):
        assert exc.status_code == status
        assert exc.code == exc.kind.value

    def test_default_messages(self):
        assert InvalidInputException().message == "Invalid request body"
        assert StudentNotFoundException().message == "Student not found"

    def test_kind_maps_without_http_objects(self):
        assert ErrorKind.NOT_FOUND.status_code == 404


class TestDescribeValidationErrors:
    def test_json_decode_error_is_invalid_body(self):
        errors = [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"}]
        assert describe_validation_errors(errors) == "Invalid request body"

    def test_wrong_type_is_invalid_body(self):
        errors = [{"type": "int_type", "loc": ("body", "age"), "msg": "Input should be a valid integer"}]
        assert describe_validation_errors(errors) == "Invalid request body"

    def test_whole_body_error_is_invalid_body(self):
        errors = [{"type": "missing", "loc": ("body",), "msg": "Field required"}]
        assert describe_validation_errors(errors) == "Invalid request body"

    def test_constraint_failures_name_each_field(self):
        errors = [
            {"type": "string_too_short", "loc": ("body", "name"), "msg": "String should have at least 1 character"},
            {"type": "greater_than_equal", "loc": ("body", "age"), "msg": "Input should be greater than or equal to 1"},
        ]
        assert describe_validation_errors(errors) == (
            "Validation error: name: String should have at least 1 character; "
            "age: Input should be greater than or equal to 1"
        )

    def test_age_above_int64_is_invalid_body(self):
        errors = [{
            "type": "less_than_equal", "loc": ("body", "age"), "input": 2**70,
            "msg": "Input should be less than or equal to 9223372036854775807",
        }]
        assert describe_validation_errors(errors) == "Invalid request body"

    def test_null_field_counts_as_missing(self):
        errors = [{"type": "string_type", "loc": ("body", "name"), "input": None, "msg": "Input should be a valid string"}]
        assert describe_validation_errors(errors) == "Validation error: name: Field required"
