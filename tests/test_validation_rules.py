"""Tests for field rules and the request schemas built from them."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from fitness.enums import ExerciseDifficulty, UserRole
from fitness.schemas import (
    CreateExerciseRequest,
    LoginRequest,
    RegisterRequest,
    TrackUserExerciseRequest,
    UpdateExerciseRequest,
    UpdateUserRequest,
)


# ─────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────

def _register_body(**overrides):
    body = {
        "name": "Jane",
        "surname": "Doe",
        "nickName": "jane",
        "email": "jane@example.com",
        "age": 30,
        "role": "user",
        "password": "secret1",
    }
    body.update(overrides)
    return body


def _first_error(model, body):
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(body)
    error = exc_info.value.errors()[0]
    return error["type"], error.get("ctx", {}).get("field"), error["msg"]


# ─────────────────────────────────────────────────────────────────
# Register / login
# ─────────────────────────────────────────────────────────────────

class TestRegisterRequest:

    def test_valid_body(self):
        request = RegisterRequest.model_validate(_register_body(name="  Jane  ", age="30"))

        assert request.name == "Jane"
        assert request.age == 30
        assert request.role == UserRole.USER

    def test_negative_age(self):
        assert _first_error(RegisterRequest, _register_body(age=-1)) == (
            "field_rule", "Age", "Age must be a non-negative integer",
        )

    @pytest.mark.parametrize("age", ["abc", 1.5, True, None])
    def test_non_integer_age(self, age):
        assert _first_error(RegisterRequest, _register_body(age=age))[2] == "Age must be a non-negative integer"

    def test_short_password(self):
        assert _first_error(RegisterRequest, _register_body(password="abc"))[2] == (
            "Password must be at least 6 characters long"
        )

    def test_invalid_email(self):
        assert _first_error(RegisterRequest, _register_body(email="not-an-email"))[2] == "Email must be a valid email"

    def test_unknown_role(self):
        assert _first_error(RegisterRequest, _register_body(role="superuser"))[1:] == ("role", "Invalid role")

    def test_blank_name(self):
        assert _first_error(RegisterRequest, _register_body(name="   "))[2] == "Name is required"

    def test_first_failing_field_wins(self):
        body = _register_body(nickName="", age=-5, password="x")
        assert _first_error(RegisterRequest, body)[1] == "NickName"

    def test_missing_field_is_pydantic_missing(self):
        body = _register_body()
        del body["surname"]
        assert _first_error(RegisterRequest, body)[0] == "missing"


class TestLoginRequest:

    def test_password_is_not_trimmed(self):
        request = LoginRequest.model_validate({"email": "a@example.com", "password": " pass "})
        assert request.password == " pass "

    def test_blank_password(self):
        assert _first_error(LoginRequest, {"email": "a@example.com", "password": "  "})[2] == "Password is required"


# ─────────────────────────────────────────────────────────────────
# Partial updates
# ─────────────────────────────────────────────────────────────────

class TestUpdateUserRequest:

    def test_only_sent_fields_are_set(self):
        request = UpdateUserRequest.model_validate({"age": 41})
        assert request.model_dump(exclude_unset=True) == {"age": 41}

    def test_empty_string_is_rejected(self):
        assert _first_error(UpdateUserRequest, {"surname": ""})[2] == "Surname cannot be empty"


class TestExerciseRequests:

    def test_create_without_program(self):
        request = CreateExerciseRequest.model_validate({"name": "Plank", "difficulty": "EASY"})

        assert request.difficulty == ExerciseDifficulty.EASY
        assert request.programID is None

    def test_difficulty_must_be_known(self):
        assert _first_error(CreateExerciseRequest, {"name": "Plank", "difficulty": "easy"})[2] == "Invalid difficulty"

    def test_program_id_must_be_positive(self):
        body = {"name": "Plank", "difficulty": "HARD", "programID": 0}
        assert _first_error(CreateExerciseRequest, body)[2] == "programID must be a positive integer"

    def test_update_accepts_empty_body(self):
        assert UpdateExerciseRequest.model_validate({}).model_dump(exclude_unset=True) == {}


class TestTrackUserExerciseRequest:

    def test_naive_date_is_utc(self):
        request = TrackUserExerciseRequest.model_validate(
            {"exerciseId": 1, "durationSeconds": 60, "completedAt": "2024-05-01T10:00:00"}
        )
        assert request.completedAt == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_offset_date_is_kept(self):
        request = TrackUserExerciseRequest.model_validate(
            {"exerciseId": 1, "durationSeconds": 60, "completedAt": "2024-05-01T10:00:00+02:00"}
        )
        assert request.completedAt.utcoffset().total_seconds() == 7200

    def test_invalid_date(self):
        body = {"exerciseId": 1, "durationSeconds": 60, "completedAt": "yesterday"}
        assert _first_error(TrackUserExerciseRequest, body)[2] == "completedAt must be a valid ISO8601 date"

    def test_duration_must_be_positive(self):
        body = {"exerciseId": 1, "durationSeconds": 0}
        assert _first_error(TrackUserExerciseRequest, body)[2] == "durationSeconds must be a positive integer"
