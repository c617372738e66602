"""
Almacenamiento local clave -> texto, persistido en un archivo JSON.

Cumple el papel del localStorage del navegador: cada clave guarda una
cadena (normalmente JSON serializado) y el archivo se reescribe completo
en cada escritura.
"""
import json
from pathlib import Path
from typing import Dict, Optional, Union

from loguru import logger


class LocalStorageError(Exception):
    """No se pudo leer o escribir el archivo de almacenamiento local."""


class LocalStorage:
    """Mapa clave -> cadena respaldado por un archivo JSON."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise LocalStorageError(f"No se pudo leer {self.path}: {e}") from e
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise LocalStorageError(f"Contenido no valido en {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise LocalStorageError(f"Contenido no valido en {self.path}: se esperaba un objeto")
        return data

    def get_item(self, key: str) -> Optional[str]:
        """Valor guardado para la clave o None si no existe."""
        value = self._read_all().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        """Guarda la cadena para la clave reescribiendo el archivo."""
        try:
            data = self._read_all()
        except LocalStorageError as e:
            # Un archivo corrupto no debe impedir guardar lo nuevo
            logger.warning(f"Se descarta el almacenamiento local ilegible: {e}")
            data = {}
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise LocalStorageError(f"No se pudo escribir {self.path}: {e}") from e
