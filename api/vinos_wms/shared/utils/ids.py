"""
Generacion de identificadores en el cliente.

Las tablas remotas no generan ids: se crean aqui con un prefijo legible
("ENT", "PACK", ...) seguido del instante en milisegundos. El sufijo
aleatorio evita colisiones entre dos altas en el mismo milisegundo.
"""
import secrets
import time


def generate_entity_id(prefix: str) -> str:
    """Id de texto: <PREFIJO><epoch ms><4 hex>."""
    return f"{prefix}{int(time.time() * 1000)}{secrets.token_hex(2).upper()}"


def generate_user_id() -> int:
    """Id numerico de usuario (epoch en microsegundos, cabe en BIGINT)."""
    return time.time_ns() // 1000
