"""Tests for localizing the first validation failure of a request."""

import pytest

from fitness.i18n.language import SupportedLanguage
from fitness.i18n.validation_messages import (
    BETWEEN,
    INVALID,
    MIN_LENGTH,
    NON_NEGATIVE_INTEGER,
    REQUIRED,
    ValidationFailure,
    capitalize,
    classify,
    is_template,
    localize_failure,
    resolve_display_name,
)
from fitness.middleware.errors import first_validation_failure


EN = SupportedLanguage.EN
SK = SupportedLanguage.SK


class TestClassify:

    def test_non_negative_integer(self):
        assert classify("Age must be a non-negative integer") == (NON_NEGATIVE_INTEGER, {})

    def test_min_length_reads_bound(self):
        assert classify("Password must be at least 6 characters long") == (MIN_LENGTH, {"min": 6})

    def test_between_reads_both_bounds(self):
        assert classify("limit must be between 1 and 100") == (BETWEEN, {"min": 1, "max": 100})

    def test_invalid_prefix(self):
        assert classify("Invalid role") == (INVALID, {})

    def test_required(self):
        assert classify("Name is required") == (REQUIRED, {})

    def test_unmatched_phrase(self):
        assert classify("Something unrelated happened") is None


class TestDisplayName:

    def test_capitalize_keeps_the_rest(self):
        assert capitalize("nickName") == "NickName"
        assert capitalize("") == ""

    def test_raw_name_lookup(self):
        assert resolve_display_name("Age", SK) == "Vek"

    def test_capitalized_lookup(self):
        assert resolve_display_name("age", SK) == "Vek"
        assert resolve_display_name("durationSeconds", SK) == "Trvanie v sekundách"

    def test_english_keeps_lowercase_labels(self):
        assert resolve_display_name("limit", EN) == "limit"
        assert resolve_display_name("role", EN) == "role"

    def test_unknown_field_is_capitalized(self):
        assert resolve_display_name("weight", SK) == "Weight"


class TestLocalizeFailure:

    def test_age_in_slovak(self):
        failure = ValidationFailure(field="Age", message="Age must be a non-negative integer")
        assert localize_failure(failure, SK) == "Vek musí byť nezáporné celé číslo"

    def test_password_min_length_in_english(self):
        failure = ValidationFailure(field="Password", message="Password must be at least 6 characters long")
        assert localize_failure(failure, EN) == "Password must be at least 6 characters long"

    def test_password_min_length_in_slovak(self):
        failure = ValidationFailure(field="Password", message="Password must be at least 6 characters long")
        assert localize_failure(failure, SK) == "Heslo musí mať aspoň 6 znakov"

    def test_limit_bounds_in_english(self):
        failure = ValidationFailure(field="limit", message="limit must be between 1 and 100")
        assert localize_failure(failure, EN) == "limit must be between 1 and 100"

    def test_limit_bounds_in_slovak(self):
        failure = ValidationFailure(field="limit", message="limit must be between 1 and 100")
        assert localize_failure(failure, SK) == "Počet záznamov musí byť medzi 1 a 100"

    def test_template_passes_through(self):
        failure = ValidationFailure(field="name", message=REQUIRED)
        assert localize_failure(failure, SK) == "Meno je povinné pole"

    def test_invalid_role(self):
        failure = ValidationFailure(field="role", message="Invalid role")
        assert localize_failure(failure, EN) == "Invalid role"
        assert localize_failure(failure, SK) == "Neplatná hodnota poľa Rola"

    def test_without_field_translates_flat_key(self):
        failure = ValidationFailure(field=None, message="Invalid request body")
        assert localize_failure(failure, SK) == "Neplatné telo požiadavky"

    def test_unmatched_phrase_translates_flat_key(self):
        failure = ValidationFailure(field="Age", message="Exercise not found")
        assert localize_failure(failure, SK) == "Cvik nebol nájdený"

    def test_unknown_text_is_returned_as_is(self):
        failure = ValidationFailure(field=None, message="Totally unknown")
        assert localize_failure(failure, SK) == "Totally unknown"

    def test_is_template(self):
        assert is_template("{fieldName} is required")
        assert not is_template("Name is required")


class TestFirstValidationFailure:

    def test_rule_error_uses_label(self):
        errors = [
            {
                "type": "field_rule",
                "loc": ("body", "age"),
                "msg": "Age must be a non-negative integer",
                "ctx": {"field": "Age"},
            },
            {"type": "missing", "loc": ("body", "role"), "msg": "Field required"},
        ]
        assert first_validation_failure(errors) == ValidationFailure(
            field="Age", message="Age must be a non-negative integer"
        )

    def test_missing_field(self):
        errors = [{"type": "missing", "loc": ("body", "email"), "msg": "Field required"}]
        assert first_validation_failure(errors) == ValidationFailure(field="email", message=REQUIRED)

    def test_other_pydantic_error_is_invalid(self):
        errors = [{"type": "int_parsing", "loc": ("query", "page"), "msg": "Input should be a valid integer"}]
        assert first_validation_failure(errors) == ValidationFailure(field="page", message=INVALID)

    def test_body_level_error(self):
        errors = [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"}]
        assert first_validation_failure(errors).field is None

    @pytest.mark.parametrize("errors", [[], [{"type": "model_type", "loc": ("body",), "msg": "x"}]])
    def test_nothing_usable(self, errors):
        assert first_validation_failure(errors) == ValidationFailure(field=None, message="Invalid request body")
