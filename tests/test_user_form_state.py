import asyncio

from fakes import FakeUserRepository, make_detail

from user_manager.application.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserDetailUseCase,
    UpdateUserUseCase,
)
from user_manager.domain.value_objects.operation_result import Error
from user_manager.presentation.state.user_detail import UserDetailStateHolder
from user_manager.presentation.state.user_form import (
    EMAIL_IMMUTABLE,
    USER_NOT_LOADED,
    CreateUserStateHolder,
    EditUserStateHolder,
)
from user_manager.presentation.state.validation import UserForm


def _form(**overrides) -> UserForm:
    values = dict(
        title=" Ms ",
        first_name=" Jane ",
        last_name="Roe",
        gender="Female",
        email="jane.roe@example.com",
        date_of_birth="1985-07-14",
        phone="5551234567",
    )
    values.update(overrides)
    return UserForm(**values)


def test_create_rejects_invalid_form_without_request():
    async def scenario():
        repo = FakeUserRepository()
        holder = CreateUserStateHolder(CreateUserUseCase(repo))
        await holder.submit(_form(title="Xx"))
        assert holder.state.error == "Please select a valid title"
        assert not holder.state.is_success
        assert repo.created == []

    asyncio.run(scenario())


def test_create_submits_normalized_user():
    async def scenario():
        repo = FakeUserRepository()
        holder = CreateUserStateHolder(CreateUserUseCase(repo))
        await holder.submit(_form())

        assert holder.state.is_success
        assert holder.state.error is None
        assert holder.state.user.id == "new-id"
        sent = repo.created[0]
        assert sent.title == "ms"
        assert sent.first_name == "Jane"
        assert sent.gender == "female"
        assert sent.picture

    asyncio.run(scenario())


def test_create_maps_server_validation_error():
    async def scenario():
        repo = FakeUserRepository()
        repo.create_error = Error(
            "Invalid user data (BODY_NOT_VALID: email: Email already used)", "BODY_NOT_VALID"
        )
        holder = CreateUserStateHolder(CreateUserUseCase(repo))
        await holder.submit(_form())

        assert not holder.state.is_success
        assert not holder.state.is_loading
        assert holder.state.error == "This email address is invalid or already in use."

    asyncio.run(scenario())


def _edit_holder(repo: FakeUserRepository) -> EditUserStateHolder:
    return EditUserStateHolder(GetUserDetailUseCase(repo), UpdateUserUseCase(repo))


def test_edit_requires_loaded_user():
    async def scenario():
        holder = _edit_holder(FakeUserRepository())
        await holder.submit(_form())
        assert holder.state.error == USER_NOT_LOADED

    asyncio.run(scenario())


def test_edit_load_failure_is_translated():
    async def scenario():
        holder = _edit_holder(FakeUserRepository())
        await holder.load("missing")
        assert holder.state.user is None
        assert holder.state.error == "The requested user was not found. It may have been deleted."

    asyncio.run(scenario())


def test_edit_updates_fields_but_not_email():
    async def scenario():
        repo = FakeUserRepository()
        repo.details["1"] = make_detail("1")
        holder = _edit_holder(repo)
        await holder.load("1")

        form = holder.form()
        assert form.email == "john.doe@example.com"
        form.first_name = "Johnny"
        await holder.submit(form)

        assert holder.state.is_success
        updated = repo.updated[0]
        assert updated.first_name == "Johnny"
        assert updated.email == "john.doe@example.com"
        assert updated.location == make_detail("1").location

    asyncio.run(scenario())


def test_edit_rejects_email_change():
    async def scenario():
        repo = FakeUserRepository()
        repo.details["1"] = make_detail("1")
        holder = _edit_holder(repo)
        await holder.load("1")

        form = holder.form()
        form.email = "someone.else@example.com"
        await holder.submit(form)

        assert holder.state.error == EMAIL_IMMUTABLE
        assert repo.updated == []

    asyncio.run(scenario())


def test_detail_load_and_delete():
    async def scenario():
        repo = FakeUserRepository()
        repo.details["1"] = make_detail("1")
        holder = UserDetailStateHolder(GetUserDetailUseCase(repo), DeleteUserUseCase(repo))

        await holder.load("1")
        assert holder.state.user.first_name == "John"

        holder.request_delete()
        assert holder.state.show_delete_dialog
        await holder.delete()

        assert repo.delete_calls == ["1"]
        assert holder.state.user_deleted
        assert not holder.state.show_delete_dialog

    asyncio.run(scenario())


def test_detail_delete_failure():
    async def scenario():
        repo = FakeUserRepository()
        repo.delete_errors["1"] = '{"error": "SERVER_ERROR"}'
        holder = UserDetailStateHolder(GetUserDetailUseCase(repo), DeleteUserUseCase(repo))

        await holder.delete("1")

        assert not holder.state.user_deleted
        assert holder.state.error == "Server error occurred. Please try again later."

    asyncio.run(scenario())
