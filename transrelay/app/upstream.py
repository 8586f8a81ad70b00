import logging

import httpx
from pydantic import ValidationError

from .config import get_settings
from .errors import UpstreamHttpError, UpstreamLogicError, UpstreamTimeout, UpstreamUnavailable
from .schemas import OutboundPayload, UpstreamResponse

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Sends one outbound payload to the translation backend and decodes its reply.

    The HTTP connection is only opened inside ``translate``, so requests
    rejected before dispatch never touch the network.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport, follow_redirects=True)

    async def translate(self, payload: OutboundPayload) -> tuple[int, UpstreamResponse]:
        try:
            async with self._http() as http:
                response = await http.post(
                    self.url,
                    json=payload.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException:
            logger.warning("Upstream call to %s timed out.", self.url)
            raise UpstreamTimeout()
        except httpx.RequestError as exc:
            logger.warning("Failed to reach upstream %s: %s", self.url, exc)
            raise UpstreamUnavailable()

        if response.status_code != 200:
            logger.warning("Upstream returned HTTP %s.", response.status_code)
            raise UpstreamHttpError(response.status_code)

        try:
            body = UpstreamResponse.model_validate_json(response.content)
        except ValidationError:
            logger.warning("Upstream returned an unexpected body.")
            raise UpstreamLogicError(response.status_code)
        return response.status_code, body


def get_upstream_client() -> UpstreamClient:
    settings = get_settings()
    return UpstreamClient(settings.upstream_url, timeout=settings.upstream_timeout)
