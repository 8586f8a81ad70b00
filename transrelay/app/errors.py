from fastapi import status


class RelayError(Exception):
    """Failure surfaced to the caller as ``{"code", "message", "data": null}``."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class MethodNotAllowed(RelayError):
    def __init__(self) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, "Invalid Request Method. Only POST method is allowed.")


class UnsupportedContentType(RelayError):
    def __init__(self) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, "Invalid Request Content Type. Only JSON content is allowed.")


class InvalidPayload(RelayError):
    def __init__(self) -> None:
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            "Invalid JSON Data. Please provide valid source_lang, target_lang, and non-empty text_list.",
        )


class UpstreamHttpError(RelayError):
    def __init__(self, upstream_status: int) -> None:
        super().__init__(upstream_status, f"HTTP Error: {upstream_status}")


class UpstreamLogicError(RelayError):
    def __init__(self, upstream_status: int) -> None:
        super().__init__(upstream_status, "Translation Error")


class UpstreamTimeout(RelayError):
    def __init__(self) -> None:
        super().__init__(status.HTTP_504_GATEWAY_TIMEOUT, "Upstream Timeout")


class UpstreamUnavailable(RelayError):
    def __init__(self) -> None:
        super().__init__(status.HTTP_502_BAD_GATEWAY, "Upstream Unreachable")
