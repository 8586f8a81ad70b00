import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import InvalidPayload, MethodNotAllowed, RelayError, UnsupportedContentType
from ..schemas import TranslationRequest
from ..services import build_translation_payload, error_envelope, remap_results, success_envelope
from ..upstream import UpstreamClient, get_upstream_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translate"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def parse_translation_request(request: Request) -> TranslationRequest:
    if request.method != "POST":
        raise MethodNotAllowed()
    if request.headers.get("content-type") != "application/json":
        raise UnsupportedContentType()

    body = await request.body()
    try:
        return TranslationRequest.model_validate_json(body)
    except ValidationError:
        raise InvalidPayload()


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Answer methods outside RELAY_METHODS with the relay's method error instead of a bare 405."""
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
        return await http_exception_handler(request, exc)
    error = MethodNotAllowed()
    logger.info("%s %s rejected with %s: %s", request.method, request.url.path, error.status_code, error.message)
    return JSONResponse(error_envelope(error).model_dump(), status_code=error.status_code)


async def handle(request: Request, client: UpstreamClient) -> JSONResponse:
    """Relay one inbound request to the upstream and shape the reply.

    Preflight and success replies carry CORS headers; error replies only
    carry ``Content-Type``.
    """
    if request.method == "OPTIONS":
        return JSONResponse(
            success_envelope([], message="OK").model_dump(),
            status_code=status.HTTP_200_OK,
            headers=CORS_HEADERS,
        )

    try:
        translation_request = await parse_translation_request(request)
        payload = build_translation_payload(translation_request)
        upstream_status, upstream_body = await client.translate(payload)
        results = remap_results(translation_request.text_list, upstream_body, upstream_status)
    except RelayError as exc:
        logger.info("%s %s rejected with %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(error_envelope(exc).model_dump(), status_code=exc.status_code)

    logger.info(
        "Translated %d text(s) from %s to %s.",
        len(results),
        translation_request.source_lang,
        translation_request.target_lang,
    )
    return JSONResponse(
        success_envelope(results).model_dump(),
        status_code=status.HTTP_200_OK,
        headers=CORS_HEADERS,
    )


@router.api_route("/{path:path}", methods=RELAY_METHODS, include_in_schema=False)
async def relay(request: Request, client: UpstreamClient = Depends(get_upstream_client)) -> JSONResponse:
    return await handle(request, client)
