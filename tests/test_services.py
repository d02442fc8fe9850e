"""Service tests against an in-memory SQLite database."""

from datetime import datetime, timezone

import pytest
from unittest.mock import MagicMock

from common.utils.exceptions import (
    BadRequestException,
    ConflictException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
)
from fitness.enums import ExerciseDifficulty, UserRole
from fitness.services import (
    AuthService,
    ExerciseService,
    ProgramService,
    UserExerciseService,
    UserService,
)


# ─────────────────────────────────────────────────────────────────
# Auth
# ─────────────────────────────────────────────────────────────────

class TestAuthService:

    async def _register(self, service, **overrides):
        data = {
            "name": "John",
            "surname": "Smith",
            "nick_name": "johnny",
            "email": "john@example.com",
            "age": 25,
            "role": UserRole.USER,
            "password": "secret1",
        }
        data.update(overrides)
        return await service.register(**data)

    @pytest.mark.asyncio
    async def test_register_stores_hash(self, db_session, jwt_auth):
        service = AuthService(db_session, jwt_auth)

        user = await self._register(service)

        assert user.id is not None
        assert user.password_hash != "secret1"
        assert jwt_auth.verify_password("secret1", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, db_session, jwt_auth, sample_user):
        service = AuthService(db_session, jwt_auth)

        with pytest.raises(BadRequestException) as exc_info:
            await self._register(service, email=sample_user.email)

        assert exc_info.value.message == "User with given email already exists"

    @pytest.mark.asyncio
    async def test_duplicate_nickname(self, db_session, jwt_auth, sample_user):
        service = AuthService(db_session, jwt_auth)

        with pytest.raises(ConflictException):
            await self._register(service, nick_name=sample_user.nick_name)

    @pytest.mark.asyncio
    async def test_login_issues_token(self, db_session, jwt_auth):
        service = AuthService(db_session, jwt_auth)
        user = await self._register(service, role=UserRole.ADMIN)

        result = await service.login("john@example.com", "secret1")
        claims = await jwt_auth.verify_token(result["token"])

        assert claims["sub"] == str(user.id)
        assert claims["role"] == "admin"
        assert claims["email"] == "john@example.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [
        ("john@example.com", "wrong-password"),
        ("nobody@example.com", "secret1"),
    ])
    async def test_login_rejects_bad_credentials(self, db_session, jwt_auth, email, password):
        service = AuthService(db_session, jwt_auth)
        await self._register(service)

        with pytest.raises(UnauthorizedException) as exc_info:
            await service.login(email, password)

        assert exc_info.value.message == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_unknown_email_skips_password_check(self, db_session):
        auth = MagicMock()
        auth.verify_password.return_value = False
        service = AuthService(db_session, auth)

        with pytest.raises(UnauthorizedException):
            await service.login("nobody@example.com", "secret1")

        auth.verify_password.assert_not_called()


# ─────────────────────────────────────────────────────────────────
# Users
# ─────────────────────────────────────────────────────────────────

class TestUserService:

    @pytest.mark.asyncio
    async def test_profile_fields(self, db_session, sample_user):
        profile = await UserService(db_session).get_profile(sample_user.id)
        assert profile == {"name": "Jane", "surname": "Doe", "age": 30, "nickName": "jane"}

    @pytest.mark.asyncio
    async def test_nickname_listing_loads_only_id_and_nickname(self, db_session, sample_user):
        db_session.expunge_all()

        users = await UserService(db_session).list_nicknames()

        assert [user.to_dict() for user in users] == [{"id": sample_user.id, "nickName": "jane"}]

    @pytest.mark.asyncio
    async def test_soft_deleted_user_is_not_found(self, db_session, sample_user):
        sample_user.soft_delete()
        await db_session.flush()

        with pytest.raises(NotFoundException):
            await UserService(db_session).get_user(sample_user.id)
        assert await UserService(db_session).list_users() == []

    @pytest.mark.asyncio
    async def test_update_ignores_none_and_unknown_fields(self, db_session, sample_user):
        user = await UserService(db_session).update_user(
            sample_user.id,
            {"age": 31, "surname": None, "email": "changed@example.com", "role": UserRole.ADMIN},
        )

        assert user.age == 31
        assert user.surname == "Doe"
        assert user.email == "jane@example.com"
        assert user.role == UserRole.ADMIN


# ─────────────────────────────────────────────────────────────────
# Exercises
# ─────────────────────────────────────────────────────────────────

class TestExerciseService:

    @pytest.mark.asyncio
    async def test_list_includes_program(self, db_session, sample_exercises, sample_programs):
        db_session.expunge_all()

        exercises = await ExerciseService(db_session).list_exercises()

        assert [e.name for e in exercises] == ["Push Up", "Pull Up", "Squat 50%", "Plank"]
        assert exercises[0].program.name == "Program 1"
        assert exercises[3].program is None

    @pytest.mark.asyncio
    async def test_filter_by_program(self, db_session, sample_exercises, sample_programs):
        exercises = await ExerciseService(db_session).list_exercises(program_id=sample_programs[0].id)
        assert [e.name for e in exercises] == ["Push Up", "Squat 50%"]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, db_session, sample_exercises):
        exercises = await ExerciseService(db_session).list_exercises(search="UP")
        assert [e.name for e in exercises] == ["Push Up", "Pull Up"]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, db_session, sample_exercises):
        exercises = await ExerciseService(db_session).list_exercises(search="%")
        assert [e.name for e in exercises] == ["Squat 50%"]

    @pytest.mark.asyncio
    async def test_pagination(self, db_session, sample_exercises):
        service = ExerciseService(db_session, default_page_limit=3)

        second_page = await service.list_exercises(page=2, limit=2)
        default_size = await service.list_exercises(page=1)

        assert [e.name for e in second_page] == ["Squat 50%", "Plank"]
        assert len(default_size) == 3

    @pytest.mark.asyncio
    async def test_create_in_unknown_program(self, db_session):
        with pytest.raises(NotFoundException) as exc_info:
            await ExerciseService(db_session).create_exercise("Lunge", ExerciseDifficulty.EASY, program_id=99)
        assert exc_info.value.message == "Program not found"

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, db_session, sample_exercises):
        exercise = await ExerciseService(db_session).update_exercise(sample_exercises[0].id, name="Wide Push Up")

        assert exercise.name == "Wide Push Up"
        assert exercise.difficulty == ExerciseDifficulty.EASY

    @pytest.mark.asyncio
    async def test_delete_is_soft(self, db_session, sample_exercises):
        service = ExerciseService(db_session)

        await service.delete_exercise(sample_exercises[0].id)

        assert sample_exercises[0].deleted_at is not None
        assert sample_exercises[0].id not in [e.id for e in await service.list_exercises()]
        with pytest.raises(NotFoundException):
            await service.delete_exercise(sample_exercises[0].id)

    @pytest.mark.asyncio
    async def test_deleted_program_reads_as_null(self, db_session, sample_exercises, sample_programs):
        sample_programs[1].soft_delete()
        await db_session.flush()
        db_session.expunge_all()

        exercises = await ExerciseService(db_session).list_exercises(search="Pull")

        assert exercises[0].program is None


# ─────────────────────────────────────────────────────────────────
# Programs
# ─────────────────────────────────────────────────────────────────

class TestProgramService:

    @pytest.mark.asyncio
    async def test_add_and_remove_exercise(self, db_session, sample_exercises, sample_programs):
        service = ProgramService(db_session)
        plank = sample_exercises[3]

        added = await service.add_exercise(sample_programs[1].id, plank.id)
        assert added.program_id == sample_programs[1].id

        removed = await service.remove_exercise(sample_programs[1].id, plank.id)
        assert removed.program_id is None

    @pytest.mark.asyncio
    async def test_add_to_unknown_program(self, db_session, sample_exercises):
        with pytest.raises(NotFoundException) as exc_info:
            await ProgramService(db_session).add_exercise(99, sample_exercises[0].id)
        assert exc_info.value.message == "Program not found"

    @pytest.mark.asyncio
    async def test_remove_from_wrong_program(self, db_session, sample_exercises, sample_programs):
        with pytest.raises(NotFoundException) as exc_info:
            await ProgramService(db_session).remove_exercise(sample_programs[1].id, sample_exercises[0].id)
        assert exc_info.value.message == "Exercise not found in given program"

    @pytest.mark.asyncio
    async def test_list_skips_deleted(self, db_session, sample_programs):
        sample_programs[0].soft_delete()
        await db_session.flush()

        programs = await ProgramService(db_session).list_programs()

        assert [p.name for p in programs] == ["Program 2"]


# ─────────────────────────────────────────────────────────────────
# Completed exercises
# ─────────────────────────────────────────────────────────────────

class TestUserExerciseService:

    @pytest.mark.asyncio
    async def test_track_and_list(self, db_session, sample_user, sample_exercises):
        service = UserExerciseService(db_session)
        completed_at = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

        entry = await service.track(sample_user.id, sample_exercises[0].id, 90, completed_at)
        db_session.expunge_all()
        entries = await service.list_completed(sample_user.id)

        assert [e.id for e in entries] == [entry.id]
        assert entries[0].duration_seconds == 90
        assert entries[0].exercise.name == "Push Up"

    @pytest.mark.asyncio
    async def test_completed_at_defaults_to_now(self, db_session, sample_user, sample_exercises):
        entry = await UserExerciseService(db_session).track(sample_user.id, sample_exercises[0].id, 30)
        assert entry.completed_at is not None

    @pytest.mark.asyncio
    async def test_track_unknown_exercise(self, db_session, sample_user):
        with pytest.raises(NotFoundException) as exc_info:
            await UserExerciseService(db_session).track(sample_user.id, 99, 30)
        assert exc_info.value.message == "Exercise not found"

    @pytest.mark.asyncio
    async def test_only_owner_can_delete(self, db_session, sample_user, sample_exercises):
        service = UserExerciseService(db_session)
        entry = await service.track(sample_user.id, sample_exercises[0].id, 30)

        with pytest.raises(ForbiddenException):
            await service.delete(sample_user.id + 1, entry.id)

        await service.delete(sample_user.id, entry.id)
        assert await service.list_completed(sample_user.id) == []

    @pytest.mark.asyncio
    async def test_delete_unknown_entry(self, db_session, sample_user):
        with pytest.raises(NotFoundException) as exc_info:
            await UserExerciseService(db_session).delete(sample_user.id, 99)
        assert exc_info.value.message == "User completed exercise not found"
