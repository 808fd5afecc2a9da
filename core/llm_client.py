import logging

from openai import AsyncOpenAI

from core.settings import Settings

logger = logging.getLogger(__name__)


def create_llm_client(settings: Settings) -> AsyncOpenAI:
    """설정의 API 키로 OpenAI 비동기 클라이언트를 생성합니다."""
    client = AsyncOpenAI(api_key=settings.openai_api_key)
    logger.info("✅ Initialized OpenAI client (model=%s)", settings.openai_model)
    return client
