import pytest

from conftest import FakeIdentity


@pytest.fixture
def service(container):
    return container.auth_service


async def test_missing_credentials(service):
    result = await service.sign_in("  ", "secret123")
    assert (result.ok, result.message) == (False, "auth_missing_credentials")

    result = await service.sign_up("player@example.com", "")
    assert (result.ok, result.message) == (False, "auth_missing_credentials")


async def test_sign_up_then_sign_in(service):
    result = await service.sign_up(" player@example.com ", "secret123")
    assert result.ok
    assert result.principal.email == "player@example.com"
    assert result.principal.is_admin is False

    result = await service.sign_in("player@example.com", "secret123")
    assert result.ok
    assert result.message == "auth_signed_in"
    assert result.access_token == result.principal.access_token


async def test_sign_up_waiting_for_confirmation(container):
    container.auth_service.identity = FakeIdentity(confirm_email=True)
    result = await container.auth_service.sign_up("player@example.com", "secret123")
    assert (result.ok, result.message) == (True, "auth_signup_check_email")
    assert result.access_token is None


async def test_provider_errors_are_reported(service, identity):
    identity.add_user("player@example.com", "secret123")

    result = await service.sign_in("player@example.com", "wrong")
    assert (result.ok, result.message) == (False, "auth_error")
    assert result.error_detail == "Invalid login credentials"

    result = await service.sign_up("player@example.com", "secret123")
    assert (result.ok, result.message) == (False, "auth_error")


async def test_configured_admin_email(service):
    result = await service.sign_up("owner@example.com", "secret123")
    assert result.principal.is_admin is True


async def test_resolve_principal(service, identity):
    user = identity.add_user("player@example.com")
    token = identity.token_for(user)

    principal = await service.resolve_principal(token)
    assert principal.id == user.id
    assert principal.is_admin is False

    assert await service.resolve_principal("forged") is None
    assert await service.resolve_principal(None) is None

    await service.sign_out(token)
    assert await service.resolve_principal(token) is None
