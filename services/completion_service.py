"""
고정된 시스템 규칙과 도구 목록으로 Chat Completion을 요청하는 서비스입니다.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

import openai
from openai import AsyncOpenAI

from core.exceptions import UpstreamError
from core.schemas import Tool
from tools.basic_tools import available_tools

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

# 범위 제한 규칙. 활성화하면 모델이 범위 밖 질문에 OUT_OF_SCOPE_MARKER만 답합니다.
SCOPE_RESTRICTION_RULE = 'Limit scope to countries/capitals; reply just "#E-OS" otherwise.'

AI_RULES: List[str] = [
    "Be helpful.",
    "Summarize in 30 words max.",
    "Avoid repeating the question; give direct answers.",
]


def _shorten_for_log(text: str, limit: int = 120) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class CompletionService:
    """Chat Completion 요청을 담당합니다."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = DEFAULT_MODEL,
        rules: Sequence[str] = tuple(AI_RULES),
        tools: Optional[Sequence[Dict[str, Any]]] = None,
    ):
        self.client = client
        self.model = model
        self.rules = tuple(rules)
        # 도구 명세는 OpenAI 호환 Tool 스키마로 검증한 뒤 None 필드를 제거해 전송
        self.tools = tuple(
            Tool.model_validate(tool).model_dump(exclude_none=True)
            for tool in (available_tools if tools is None else tools)
        )

    @property
    def system_prompt(self) -> str:
        # 규칙은 항목별이 아니라 쉼표로 이어 붙여 하나의 system 메시지로 보냅니다.
        return ",".join(self.rules)

    def build_messages(self, user_text: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": user_text},
        ]

    async def request_completion(self, user_text: str):
        """
        모델에 질문을 보내고 첫 번째 choice의 message를 그대로 반환합니다.
        원격 호출이 실패하면 UpstreamError를 발생시킵니다.
        """
        logger.info(
            "[CHAT][LLM REQUEST] model=%s user=%s",
            self.model,
            _shorten_for_log(user_text),
        )
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(user_text),
                tools=list(self.tools),
            )
        except openai.APIError as e:
            logger.error("LLM API 호출 오류: %s: %s", type(e).__name__, e, exc_info=True)
            raise UpstreamError("Failed to get a response from the completion service") from e

        message = completion.choices[0].message
        logger.info(
            "[CHAT][LLM RESPONSE] has_content=%s tool_calls=%d",
            bool(message.content),
            len(message.tool_calls or []),
        )
        return message
