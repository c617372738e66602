"""
Tests de autenticación y administración de usuarios.
"""
import pytest

from vinos_wms.application.dto.auth_dto import LoginRequestDTO, UserCreateDTO, UserUpdateDTO
from vinos_wms.application.use_cases import AuthUseCases, UserUseCases
from vinos_wms.core.security import SecurityService
from vinos_wms.shared.constants.warehouse_constants import AuditAction, NotificationType, UserRole
from vinos_wms.shared.exceptions.auth import InvalidCredentialsException, UnauthorizedException
from vinos_wms.shared.exceptions.domain import EntityAlreadyExistsException


def test_password_hash_is_salted_and_verifiable():
    first = SecurityService.hash_password("password")
    second = SecurityService.hash_password("password")

    assert first != "password"
    assert first != second
    assert SecurityService.verify_password("password", first)
    assert not SecurityService.verify_password("otra", first)
    assert not SecurityService.verify_password("password", None)


async def test_login_issues_token_and_records_audit(seeded_context):
    use_cases = AuthUseCases(seeded_context)
    token = await use_cases.login(LoginRequestDTO(email="Juan@Vinos.com", password="password"))

    assert token.user.id == 2
    assert use_cases.resolve_user(token.access_token).name == "Juan Almacén"
    entry = seeded_context.audit_log.entries[0]
    assert entry.action == AuditAction.LOGIN
    assert entry.entity_id == 2
    assert seeded_context.notifications.visible()[-1].message == "Bienvenido, Juan Almacén!"


async def test_login_with_wrong_password_fails(seeded_context):
    with pytest.raises(InvalidCredentialsException):
        await AuthUseCases(seeded_context).login(LoginRequestDTO(email="juan@vinos.com", password="nope"))

    assert seeded_context.audit_log.entries == []


async def test_login_with_unknown_email_fails(seeded_context):
    with pytest.raises(InvalidCredentialsException):
        await AuthUseCases(seeded_context).login(LoginRequestDTO(email="nadie@vinos.com", password="password"))


async def test_logout_records_audit_and_info(seeded_context, operator):
    AuthUseCases(seeded_context).logout(operator)

    assert seeded_context.audit_log.entries[0].action == AuditAction.LOGOUT
    last = seeded_context.notifications.visible()[-1]
    assert (last.type, last.message) == (NotificationType.INFO, "Has cerrado sesión.")


async def test_resolve_user_rejects_unknown_user(seeded_context):
    token = seeded_context.security.issue_token(999)

    with pytest.raises(UnauthorizedException):
        AuthUseCases(seeded_context).resolve_user(token)


async def test_register_then_login(seeded_context):
    dto = UserCreateDTO(name="Marta", email="marta@vinos.com", password="secreta", role=UserRole.ADMINISTRATIVE)
    created = await UserUseCases(seeded_context).register(dto)

    row = (await seeded_context.client.select("profiles", {"id": created.id})).first()
    assert row["password_hash"] != "secreta"
    assert seeded_context.audit_log.entries == []

    token = await AuthUseCases(seeded_context).login(LoginRequestDTO(email="marta@vinos.com", password="secreta"))
    assert token.user.role == UserRole.ADMINISTRATIVE


async def test_register_duplicate_email_is_rejected(seeded_context):
    dto = UserCreateDTO(name="Otro Juan", email="juan@vinos.com", password="x")

    with pytest.raises(EntityAlreadyExistsException):
        await UserUseCases(seeded_context).register(dto)

    last = seeded_context.notifications.visible()[-1]
    assert (last.type, last.message) == (NotificationType.ERROR, "El correo electrónico ya está registrado.")
    assert (await seeded_context.client.count("profiles")).first()["count"] == 3


async def test_update_user_password_is_hashed(seeded_context, operator):
    use_cases = UserUseCases(seeded_context)
    updated = await use_cases.update_user(3, UserUpdateDTO(password="nueva", name="Ana María"), operator)

    assert updated.name == "Ana María"
    token = await AuthUseCases(seeded_context).login(LoginRequestDTO(email="ana@vinos.com", password="nueva"))
    assert token.user.id == 3
    assert seeded_context.notifications.visible()[-2].message == "Usuario Ana María actualizado."


async def test_delete_user(seeded_context, operator):
    await UserUseCases(seeded_context).delete_user(3, operator)

    assert seeded_context.state.find_user(3) is None
    assert (await seeded_context.client.select("profiles", {"id": 3})).data == []
    assert seeded_context.audit_log.entries[0].entity == "User"
