import logging

import httpx

from core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class DemoApiService:
    """외부 데모 API(httpbin.org)를 호출합니다."""

    def __init__(self, url: str):
        self.url = url

    async def call(self) -> int:
        """데모 API를 호출하고 응답 상태 코드를 반환합니다."""
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Error calling external API: %s", e)
            raise UpstreamError("Failed to call external API") from e
        return response.status_code
