"""
DTOs de autenticación y usuarios.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from vinos_wms.shared.constants.warehouse_constants import UserRole


class LoginRequestDTO(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class UserCreateDTO(BaseModel):
    """Alta de usuario (registro o alta desde administración)."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.WAREHOUSE


class RegisterRequestDTO(BaseModel):
    """Registro público: el rol siempre es Almacen."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)

    def as_user(self) -> UserCreateDTO:
        return UserCreateDTO(name=self.name, email=self.email, password=self.password)


class UserUpdateDTO(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, min_length=3, max_length=255)
    password: Optional[str] = Field(None, min_length=1, description="Nueva contraseña; se guarda como hash")
    role: Optional[UserRole] = None

    @field_validator("name", "email", "password", "role")
    @classmethod
    def value_cannot_be_null(cls, v):
        if v is None:
            raise ValueError("El campo no puede ser nulo")
        return v


class UserResponseDTO(BaseModel):
    """Nunca incluye el hash de la contraseña."""

    id: int
    name: str
    email: str
    role: UserRole

    class Config:
        from_attributes = True


class TokenResponseDTO(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponseDTO
