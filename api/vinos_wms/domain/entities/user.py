"""
Entidad de dominio: User (usuario del almacen).
"""
from dataclasses import dataclass
from typing import Optional

from vinos_wms.shared.constants.warehouse_constants import UserRole


@dataclass
class User:
    """
    Usuario de la aplicacion.

    Solo se conserva el hash de la contraseña; la verificacion se hace
    en el proceso con SecurityService.
    """

    id: int
    name: str
    email: str
    role: UserRole = UserRole.WAREHOUSE
    password_hash: Optional[str] = None

    def __post_init__(self):
        if not self.email:
            raise ValueError("El email del usuario no puede estar vacío")
        self.email = self.email.strip().lower()

    def is_super_user(self) -> bool:
        return self.role == UserRole.SUPER_USER
