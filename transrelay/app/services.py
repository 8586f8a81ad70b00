import random
import time
import uuid

from .errors import RelayError, UpstreamLogicError
from .schemas import (
    ErrorResponse,
    OutboundHeader,
    OutboundPayload,
    OutboundSource,
    OutboundTarget,
    SuccessResponse,
    TranslationRequest,
    TranslationResult,
    UpstreamResponse,
)

OPERATING_SYSTEMS = ("Mac OS", "Windows")
SUCCESS_RET_CODE = "succ"


def random_browser_version() -> str:
    major = random.randint(100, 116)
    minor = random.randint(0, 19)
    patch = random.randint(0, 19)
    return f"{major}.{minor}.{patch}"


def generate_client_key() -> str:
    """Synthesize a browser-like identity so each upstream call looks like a distinct client."""
    os_name = random.choice(OPERATING_SYSTEMS)
    epoch_ms = int(time.time() * 1000)
    return f"browser-chrome-{random_browser_version()}-{os_name}-{uuid.uuid4()}-{epoch_ms}"


def build_translation_payload(request: TranslationRequest) -> OutboundPayload:
    return OutboundPayload(
        header=OutboundHeader(client_key=generate_client_key()),
        source=OutboundSource(lang=request.source_lang, text_list=list(request.text_list)),
        target=OutboundTarget(lang=request.target_lang),
    )


def remap_results(
    text_list: list[str],
    upstream: UpstreamResponse,
    upstream_status: int,
) -> list[TranslationResult]:
    if upstream.header.ret_code != SUCCESS_RET_CODE:
        raise UpstreamLogicError(upstream_status)
    # Extra upstream entries are ignored; missing ones cannot be paired.
    if len(upstream.auto_translation) < len(text_list):
        raise UpstreamLogicError(upstream_status)

    return [
        TranslationResult(
            original=text,
            original_length=len(text),
            result=translated,
            result_length=len(translated),
        )
        for text, translated in zip(text_list, upstream.auto_translation)
    ]


def success_envelope(data: list[TranslationResult], message: str = "Translation Successful") -> SuccessResponse:
    return SuccessResponse(code=200, message=message, data=data)


def error_envelope(error: RelayError) -> ErrorResponse:
    return ErrorResponse(code=error.status_code, message=error.message)
