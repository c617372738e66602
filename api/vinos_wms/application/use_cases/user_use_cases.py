"""
Casos de uso de usuarios (administración de perfiles).
"""
from dataclasses import replace
from typing import List, Optional

from vinos_wms.application.dto.auth_dto import UserCreateDTO, UserResponseDTO, UserUpdateDTO
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.domain.entities import User
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.shared.constants.warehouse_constants import AuditAction
from vinos_wms.shared.exceptions.domain import EntityAlreadyExistsException, EntityNotFoundException
from vinos_wms.shared.utils.ids import generate_user_id

DUPLICATE_EMAIL_MESSAGE = "El correo electrónico ya está registrado."


class UserUseCases(WarehouseUseCases):

    def list_users(self) -> List[UserResponseDTO]:
        return [UserResponseDTO.model_validate(u) for u in self.state.users]

    def _get(self, user_id: int) -> User:
        user = self.state.find_user(user_id)
        if user is None:
            raise EntityNotFoundException("Usuario", user_id)
        return user

    async def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None) -> None:
        """
        Comprueba en remoto que el email no esté en uso.

        Raises:
            EntityAlreadyExistsException: Si otro usuario ya lo tiene
        """
        email = email.strip().lower()
        result = await self.client.select(tm.USERS.table, {"email": email})
        result.raise_for_error("No se pudo comprobar el correo electrónico")
        if any(int(row["id"]) != exclude_id for row in result.data):
            self.notifications.error(DUPLICATE_EMAIL_MESSAGE)
            raise EntityAlreadyExistsException("Usuario", "email", email, message=DUPLICATE_EMAIL_MESSAGE)

    async def _insert_user(self, dto: UserCreateDTO) -> User:
        await self._ensure_email_free(dto.email)
        user = User(
            id=generate_user_id(),
            name=dto.name,
            email=dto.email,
            role=dto.role,
            password_hash=self.context.security.hash_password(dto.password),
        )
        result = await self.client.insert(tm.USERS.table, [tm.USERS.to_row(user)])
        result.raise_for_error("No se pudo crear el usuario")
        self.state.users.insert(0, user)
        return user

    async def register(self, dto: UserCreateDTO) -> UserResponseDTO:
        """Alta pública: no hay usuario actuando, no se audita."""
        user = await self._insert_user(dto)
        self.notifications.success("Usuario creado con éxito. Ahora puedes iniciar sesión.")
        return UserResponseDTO.model_validate(user)

    async def create_user(self, dto: UserCreateDTO, acting_user: User) -> UserResponseDTO:
        user = await self._insert_user(dto)
        self._record(acting_user, AuditAction.CREATE, "User", user.id)
        self.notifications.success("Usuario creado con éxito.")
        return UserResponseDTO.model_validate(user)

    async def update_user(self, user_id: int, dto: UserUpdateDTO, acting_user: User) -> UserResponseDTO:
        current = self._get(user_id)
        changes = dto.model_dump(exclude_unset=True, exclude={"password"})
        if dto.email is not None:
            await self._ensure_email_free(dto.email, exclude_id=user_id)
        if dto.password:
            changes["password_hash"] = self.context.security.hash_password(dto.password)
        updated = replace(current, **changes)

        result = await self.client.update(
            tm.USERS.table,
            tm.USERS.to_row(updated, exclude_pk=True),
            {"id": user_id},
        )
        result.raise_for_error("No se pudo actualizar el usuario")
        if not result.data:
            raise EntityNotFoundException("Usuario", user_id)

        self.state.users[self.state.users.index(current)] = updated
        self._record(acting_user, AuditAction.UPDATE, "User", user_id)
        self.notifications.success(f"Usuario {updated.name} actualizado.")
        return UserResponseDTO.model_validate(updated)

    async def delete_user(self, user_id: int, acting_user: User) -> None:
        current = self._get(user_id)

        result = await self.client.delete(tm.USERS.table, {"id": user_id})
        result.raise_for_error("No se pudo eliminar el usuario")

        self.state.users.remove(current)
        self._record(acting_user, AuditAction.DELETE, "User", user_id)
        self.notifications.success("Usuario eliminado.")
