from typing import List

from fastapi import APIRouter, Depends, status

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_user_use_cases
from vinos_wms.application.dto.auth_dto import UserCreateDTO, UserResponseDTO, UserUpdateDTO
from vinos_wms.application.use_cases import UserUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/usuarios", tags=["Usuarios"])


@router.get("/", response_model=List[UserResponseDTO])
async def list_users(
    _: User = Depends(get_current_user),
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    return use_cases.list_users()


@router.post("/", response_model=UserResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_user(
    dto: UserCreateDTO,
    user: User = Depends(get_current_user),
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    return await use_cases.create_user(dto, user)


@router.put("/{user_id}", response_model=UserResponseDTO)
async def update_user(
    user_id: int,
    dto: UserUpdateDTO,
    user: User = Depends(get_current_user),
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    return await use_cases.update_user(user_id, dto, user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    user: User = Depends(get_current_user),
    use_cases: UserUseCases = Depends(get_user_use_cases),
):
    await use_cases.delete_user(user_id, user)
