from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator


class TranslationRequest(BaseModel):
    source_lang: StrictStr
    target_lang: StrictStr
    text_list: list[StrictStr] = Field(..., min_length=1)

    @field_validator("text_list")
    @classmethod
    def reject_blank_texts(cls, value: list[str]) -> list[str]:
        if any(not text.strip() for text in value):
            raise ValueError("text_list entries must not be blank.")
        return value


class OutboundHeader(BaseModel):
    fn: str = "auto_translation"
    session: str = ""
    client_key: str
    user: str = ""


class OutboundSource(BaseModel):
    lang: str
    text_list: list[str]


class OutboundTarget(BaseModel):
    lang: str


class OutboundPayload(BaseModel):
    header: OutboundHeader
    type: str = "plain"
    model_category: str = "normal"
    text_domain: str = ""
    source: OutboundSource
    target: OutboundTarget


class UpstreamHeader(BaseModel):
    ret_code: str


class UpstreamResponse(BaseModel):
    header: UpstreamHeader
    auto_translation: list[str] = Field(default_factory=list)


class TranslationResult(BaseModel):
    original: str
    original_length: int
    result: str
    result_length: int


class ApiResponse(BaseModel):
    code: int
    message: str
    data: list[Any] | None = None


class SuccessResponse(ApiResponse):
    data: list[TranslationResult]


class ErrorResponse(ApiResponse):
    data: None = None
