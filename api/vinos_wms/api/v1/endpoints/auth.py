"""
Endpoints de autenticación.
"""
from fastapi import APIRouter, Depends, status

from vinos_wms.api.v1.dependencies.use_case_deps import (
    get_auth_use_cases,
    get_current_user,
    get_user_use_cases,
)
from vinos_wms.application.dto.auth_dto import (
    LoginRequestDTO,
    RegisterRequestDTO,
    TokenResponseDTO,
    UserResponseDTO,
)
from vinos_wms.application.use_cases import AuthUseCases, UserUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=TokenResponseDTO, summary="Iniciar sesión")
async def login(dto: LoginRequestDTO, use_cases: AuthUseCases = Depends(get_auth_use_cases)):
    return await use_cases.login(dto)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="Cerrar sesión")
async def logout(
    user: User = Depends(get_current_user),
    use_cases: AuthUseCases = Depends(get_auth_use_cases),
):
    use_cases.logout(user)


@router.post(
    "/register",
    response_model=UserResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar un usuario nuevo",
)
async def register(dto: RegisterRequestDTO, use_cases: UserUseCases = Depends(get_user_use_cases)):
    """Alta pública con rol Almacen; los demás roles se asignan desde /usuarios."""
    return await use_cases.register(dto.as_user())


@router.get("/me", response_model=UserResponseDTO, summary="Usuario de la sesión")
async def me(user: User = Depends(get_current_user)):
    return UserResponseDTO.model_validate(user)
