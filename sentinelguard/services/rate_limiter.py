import hashlib
import logging
import threading
import time
from typing import Callable, Dict, Optional

from sentinelguard.models.rate_limit_model import RateLimitEntry

logger = logging.getLogger("rate_limiter")

RATE_LIMIT_WINDOW_MS = 60 * 1000
MAX_REQUESTS_PER_WINDOW = 20


def _now_ms() -> float:
    return time.time() * 1000


class RateLimiter:
    """
    Limitador de ventana fija por identidad de cliente.

    Las identidades se guardan sólo como hash SHA-256. Las entradas
    vencidas se eliminan en cada llamada a admit(), sin temporizadores.
    """

    def __init__(
        self,
        window_ms: int = RATE_LIMIT_WINDOW_MS,
        max_requests: int = MAX_REQUESTS_PER_WINDOW,
        clock: Callable[[], float] = _now_ms,
    ):
        self.window_ms = window_ms
        self.max_requests = max_requests
        self._clock = clock
        self._entries: Dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def hash_identity(raw_address: Optional[str]) -> str:
        return hashlib.sha256((raw_address or "").encode()).hexdigest()

    def admit(self, key: str, now: Optional[float] = None) -> bool:
        """
        Registra una solicitud para `key` y decide si se permite.

        Args:
            key: Hash de identidad del cliente
            now: Instante en milisegundos (por defecto, el reloj del limitador)

        Returns:
            bool: True si la solicitud entra en la ventana, False si se rechaza
        """
        with self._lock:
            # Leer el reloj bajo el candado mantiene los instantes ordenados
            if now is None:
                now = self._clock()
            self._sweep(now)

            entry = self._entries.get(key)
            if entry is None or now - entry.window_start > self.window_ms:
                self._entries[key] = RateLimitEntry(count=1, window_start=now)
                return True

            if entry.count >= self.max_requests:
                logger.debug("Denied %s (count=%s)", key[:12], entry.count)
                return False

            entry.count += 1
            return True

    def sweep(self, now: Optional[float] = None) -> None:
        """Elimina las entradas cuya ventana ya venció."""
        with self._lock:
            if now is None:
                now = self._clock()
            self._sweep(now)

    def get_entry(self, key: str) -> Optional[RateLimitEntry]:
        with self._lock:
            entry = self._entries.get(key)
            return entry.model_copy() if entry else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _sweep(self, now: float) -> None:
        expired = [
            key
            for key, entry in self._entries.items()
            if now - entry.window_start > self.window_ms
        ]
        for key in expired:
            del self._entries[key]
