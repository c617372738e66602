"""
Casos de uso de autenticación.

El perfil se busca en remoto por email y la contraseña se verifica en el
proceso contra el hash guardado.
"""
from loguru import logger

from vinos_wms.application.dto.auth_dto import LoginRequestDTO, TokenResponseDTO, UserResponseDTO
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.domain.entities import User
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.infrastructure.remote.types import MappingError
from vinos_wms.shared.constants.warehouse_constants import AuditAction
from vinos_wms.shared.exceptions.auth import InvalidCredentialsException, UnauthorizedException


class AuthUseCases(WarehouseUseCases):

    async def login(self, dto: LoginRequestDTO) -> TokenResponseDTO:
        """
        Inicia sesión y devuelve un token de acceso.

        Raises:
            InvalidCredentialsException: Email desconocido o contraseña incorrecta
            RemoteCallException: Si la base remota no responde
        """
        email = dto.email.strip().lower()
        result = await self.client.select(tm.USERS.table, {"email": email}, limit=1)
        result.raise_for_error("No se pudo iniciar sesión")

        row = result.first()
        if row is None:
            logger.warning(f"Intento de login con email desconocido: {email}")
            raise InvalidCredentialsException()
        try:
            user = tm.USERS.from_row(row)
        except MappingError as e:
            logger.error(f"Perfil no válido para {email}: {e}")
            raise InvalidCredentialsException()

        if not self.context.security.verify_password(dto.password, user.password_hash):
            logger.warning(f"Contraseña incorrecta para {email}")
            raise InvalidCredentialsException()

        if self.state.find_user(user.id) is None:
            self.state.users.append(user)

        token = self.context.security.issue_token(user.id, user.email)
        self._record(user, AuditAction.LOGIN, "User", user.id)
        self.notifications.success(f"Bienvenido, {user.name}!")
        return TokenResponseDTO(access_token=token, user=UserResponseDTO.model_validate(user))

    def logout(self, user: User) -> None:
        self._record(user, AuditAction.LOGOUT, "User", user.id)
        self.notifications.info("Has cerrado sesión.")

    def resolve_user(self, token: str) -> User:
        """Usuario del token, buscado en el estado de vista."""
        user = self.state.find_user(self.context.security.user_id_from_token(token))
        if user is None:
            raise UnauthorizedException("El usuario del token ya no existe")
        return user
