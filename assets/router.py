"""
Everything outside /api/ belongs to the static frontend. Requests are relayed
to the asset server at ASSETS_URL; without one configured they are 404s.
"""
from fastapi import APIRouter, HTTPException, Request, Response, status
import httpx
import logging
import os

logger = logging.getLogger(__name__)

router = APIRouter()

ASSETS_URL = os.getenv("ASSETS_URL")

# Hop-by-hop and length headers are recomputed by the ASGI server
FORWARDED_HEADERS = ("content-type", "cache-control", "etag", "last-modified")


def get_asset_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=10.0, follow_redirects=True)


@router.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
async def forward_to_assets(full_path: str, request: Request):
    if full_path == "api" or full_path.startswith("api/") or not ASSETS_URL:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    url = f"{ASSETS_URL.rstrip('/')}/{full_path}"
    async with get_asset_client() as client:
        upstream = await client.request(
            request.method,
            url,
            params=list(request.query_params.multi_items()),
            headers={"accept": request.headers.get("accept", "*/*")},
        )

    logger.debug(f"Asset {request.method} /{full_path} -> {upstream.status_code}")
    headers = {
        name: upstream.headers[name]
        for name in FORWARDED_HEADERS
        if name in upstream.headers
    }
    return Response(content=upstream.content, status_code=upstream.status_code, headers=headers)
