import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from sentinelguard.core.config import get_settings

router = APIRouter()

logger = logging.getLogger("frontend")


def resolve_static_file(public_dir: Path, request_path: str) -> Optional[Path]:
    """
    Devuelve el archivo estático pedido si existe dentro de `public_dir`.

    Rutas que escapan del directorio público nunca se resuelven.
    """
    root = public_dir.resolve()
    candidate = (root / request_path.lstrip("/")).resolve()
    if candidate != root and root not in candidate.parents:
        logger.warning("Rejected path outside public dir: %s", request_path)
        return None
    if candidate.is_file():
        return candidate
    return None


# Debe registrarse al final: captura cualquier ruta GET no atendida
@router.get("/{full_path:path}", include_in_schema=False)
def serve_frontend(full_path: str):
    public_dir = get_settings().public_dir

    asset = resolve_static_file(public_dir, full_path)
    if asset is not None:
        return FileResponse(asset)

    index = public_dir / "index.html"
    if index.is_file():
        return FileResponse(index)

    raise HTTPException(status_code=404, detail="Not Found")
