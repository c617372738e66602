"""
Errores de sesión: login fallido, token caducado o ausente.
"""
from vinos_wms.shared.exceptions.base import AppException


class AuthException(AppException):
    status_code = 401
    error_code = "AUTH_ERROR"


class InvalidCredentialsException(AuthException):
    error_code = "INVALID_CREDENTIALS"

    def __init__(self):
        super().__init__("Email o contraseña incorrectos")


class TokenExpiredException(AuthException):
    error_code = "TOKEN_EXPIRED"

    def __init__(self):
        super().__init__("La sesión ha expirado, vuelve a iniciar sesión")


class UnauthorizedException(AuthException):
    error_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Debes iniciar sesión"):
        super().__init__(message)
