"""
Contraseñas de operadores y tokens de sesión.

Las contraseñas de profiles se guardan como hash con sal (pbkdf2_sha256) y
se verifican aquí; el texto plano no sale del proceso. La sesión es un JWT
cuyo "sub" es el id numérico del perfil.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from vinos_wms.core.config import settings
from vinos_wms.shared.exceptions.auth import (
    InvalidCredentialsException,
    TokenExpiredException,
    UnauthorizedException,
)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class SecurityService:
    """
    Hash de contraseñas y emisión/lectura de tokens.

    La clave, el algoritmo y la duración se leen de settings salvo que se
    pasen explícitamente.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        token_minutes: Optional[int] = None,
    ):
        self.secret_key = secret_key or settings.SECRET_KEY
        self.algorithm = algorithm or settings.ALGORITHM
        self.token_minutes = token_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, password_hash: Optional[str]) -> bool:
        """
        Compara la contraseña con el hash del perfil.

        Un perfil sin hash (o con un hash ilegible) nunca valida.
        """
        if not password_hash:
            return False
        try:
            return pwd_context.verify(plain_password, password_hash)
        except ValueError:
            return False

    def issue_token(self, user_id: int, email: Optional[str] = None,
                    expires_in: Optional[timedelta] = None) -> str:
        """Token de sesión para el perfil indicado."""
        claims: Dict[str, Any] = {"sub": str(user_id)}
        if email:
            claims["email"] = email
        claims["exp"] = datetime.now(timezone.utc) + (expires_in or timedelta(minutes=self.token_minutes))
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Raises:
            TokenExpiredException: si el token ha caducado
            InvalidCredentialsException: si la firma o el formato no son válidos
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError:
            raise InvalidCredentialsException()

    def user_id_from_token(self, token: str) -> int:
        payload = self.decode_token(token)
        try:
            return int(payload.get("sub"))
        except (TypeError, ValueError):
            raise UnauthorizedException("Token sin usuario")


security_service = SecurityService()
