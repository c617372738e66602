"""
Excepciones de llamadas a la base de datos remota.
"""
from typing import Optional

from vinos_wms.shared.exceptions.base import AppException


class RemoteCallException(AppException):
    status_code = 502
    error_code = "REMOTE_CALL_FAILED"

    """
    La base de datos remota rechazó o no respondió a una operación.

    El mensaje remoto original se adjunta en details["remote_message"].
    """

    def __init__(self, message: str, remote_message: Optional[str] = None, table: Optional[str] = None):
        details = {}
        if remote_message:
            details["remote_message"] = remote_message
        if table:
            details["table"] = table
        super().__init__(message, details=details)
