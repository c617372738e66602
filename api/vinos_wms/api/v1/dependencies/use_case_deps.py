"""
Dependencias para inyeccion de casos de uso.

Todos los casos de uso comparten el contexto del proceso guardado en
app.state.context (estado de vista, auditoria, notificaciones y cliente).
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vinos_wms.application.use_cases import (
    AuthUseCases,
    EntradaUseCases,
    IncidenciaUseCases,
    PackUseCases,
    ProductUseCases,
    ReportUseCases,
    SalidaUseCases,
    SyncUseCases,
    UserUseCases,
)
from vinos_wms.core.context import AppContext
from vinos_wms.domain.entities import User
from vinos_wms.shared.exceptions.auth import UnauthorizedException

bearer_scheme = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    """Contexto de la aplicacion creado en el arranque."""
    return request.app.state.context


def get_auth_use_cases(context: AppContext = Depends(get_context)) -> AuthUseCases:
    return AuthUseCases(context)


def get_entrada_use_cases(context: AppContext = Depends(get_context)) -> EntradaUseCases:
    return EntradaUseCases(context)


def get_pack_use_cases(context: AppContext = Depends(get_context)) -> PackUseCases:
    return PackUseCases(context)


def get_salida_use_cases(context: AppContext = Depends(get_context)) -> SalidaUseCases:
    return SalidaUseCases(context)


def get_incidencia_use_cases(context: AppContext = Depends(get_context)) -> IncidenciaUseCases:
    return IncidenciaUseCases(context)


def get_user_use_cases(context: AppContext = Depends(get_context)) -> UserUseCases:
    return UserUseCases(context)


def get_product_use_cases(context: AppContext = Depends(get_context)) -> ProductUseCases:
    return ProductUseCases(context)


def get_report_use_cases(context: AppContext = Depends(get_context)) -> ReportUseCases:
    return ReportUseCases(context)


def get_sync_use_cases(context: AppContext = Depends(get_context)) -> SyncUseCases:
    return SyncUseCases(context)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthUseCases = Depends(get_auth_use_cases),
) -> User:
    """
    Usuario que actua en la peticion.

    Raises:
        UnauthorizedException: Si no hay token o el usuario no existe
    """
    if credentials is None:
        raise UnauthorizedException()
    return auth.resolve_user(credentials.credentials)
