"""Health check and API description routes (no auth)."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import Response

router = APIRouter()

OPENAPI_PATH = Path(__file__).resolve().parent / "openapi.yaml"
BASE_URL_PLACEHOLDER = "{{BASE_URL}}"


def base_url_from(request: Request) -> str:
    """Public base URL of this proxy as seen by the caller."""
    proto = request.headers.get("x-forwarded-proto", "https")
    host = request.headers.get("host", "")
    return f"{proto}://{host}"


@router.get("/healthz")
async def healthz() -> dict:
    """Liveness check — no external calls."""
    return {"ok": True}


@router.get("/openapi.yaml")
async def openapi_yaml(request: Request) -> Response:
    """OpenAPI document for the proxy, pointed at the requesting host."""
    doc = OPENAPI_PATH.read_text(encoding="utf-8")
    return Response(doc.replace(BASE_URL_PLACEHOLDER, base_url_from(request)), media_type="application/yaml")
