import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Union

from sentinelguard.models.alert_model import Alert
from sentinelguard.repositories.base_repo import BaseRepository

logger = logging.getLogger("alert_store")

EMPTY_COLLECTION = "[]"


class AlertRepository(BaseRepository[Alert]):
    """
    Repositorio de alertas sobre un único archivo JSON.

    El archivo contiene un arreglo con todas las alertas. Cada inserción
    lee el arreglo completo, agrega la alerta y reescribe el archivo.
    """

    def __init__(self, alerts_file: Union[str, Path]):
        self.alerts_file = Path(alerts_file)
        self._lock = threading.RLock()

    def initialize(self) -> None:
        """
        Garantiza que el archivo exista y contenga un arreglo JSON.

        Si no existe se crea vacío; si está corrupto o no es un arreglo se
        reinicia a vacío. Nunca lanza excepciones: los fallos se registran.
        """
        with self._lock:
            try:
                self.alerts_file.parent.mkdir(parents=True, exist_ok=True)

                if not self.alerts_file.exists():
                    self._write_text(EMPTY_COLLECTION)
                    logger.info("Created empty alerts file at %s", self.alerts_file)
                    return

                parsed = json.loads(self.alerts_file.read_text(encoding="utf-8"))
                if not isinstance(parsed, list):
                    logger.warning(
                        "%s is not an array. Reinitializing to empty array.",
                        self.alerts_file.name,
                    )
                    self._write_text(EMPTY_COLLECTION)
            except (OSError, ValueError) as e:
                logger.error("Failed to initialize alerts file: %s", e)
                try:
                    self.alerts_file.parent.mkdir(parents=True, exist_ok=True)
                    self._write_text(EMPTY_COLLECTION)
                except OSError as inner:
                    logger.error("Failed to recover alerts file: %s", inner)

    def read_all(self) -> List[Dict[str, Any]]:
        """Lee todas las alertas. Ante cualquier fallo devuelve una lista vacía."""
        # Mismo candado que append_one: nunca se lee un archivo a medio escribir
        with self._lock:
            try:
                data = json.loads(self.alerts_file.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.error("Read alerts failed: %s", e)
                return []

        if not isinstance(data, list):
            logger.error("Read alerts failed: stored value is not an array")
            return []
        return data

    def append_one(self, entity: Alert) -> bool:
        """
        Agrega una alerta reescribiendo el archivo completo.

        Args:
            entity: Alerta ya validada y con hora asignada

        Returns:
            bool: True si se escribió, False si falló la escritura
        """
        with self._lock:
            alerts = self.read_all()
            alerts.append(entity.model_dump(mode="json"))
            try:
                self._write_text(json.dumps(alerts, indent=2))
            except (OSError, TypeError) as e:
                logger.error("Write alerts failed: %s", e)
                return False
        return True

    def _write_text(self, content: str) -> None:
        self.alerts_file.write_text(content, encoding="utf-8")
