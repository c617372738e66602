"""
Red de seguridad para fallos no previstos.

Los AppException los resuelve el manejador registrado en main; aquí solo
llegan errores de programación o de librerías, que se registran con traza
y se devuelven como un 500 con el mismo formato de cuerpo.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from vinos_wms.shared.exceptions.base import AppException

INTERNAL_ERROR_MESSAGE = "Ha ocurrido un error interno del servidor"


class ErrorHandlerMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.opt(exception=exc).error(
                "Error no manejado en {} {}", request.method, request.url.path
            )
            body = AppException(INTERNAL_ERROR_MESSAGE, error_code="INTERNAL_SERVER_ERROR").to_dict()
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
