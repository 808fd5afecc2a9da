"""
질문 검증과 모델 응답 조립을 담당하는 서비스입니다.
"""
import logging
from typing import Optional

from core.exceptions import InvalidInputError
from core.schemas import ModelResponse
from services import tool_dispatcher
from services.completion_service import CompletionService

logger = logging.getLogger(__name__)

MAX_QUESTION_WORDS = 30
TOO_LONG_MESSAGE = "Prompt was too long. Must be less than 31 words."
EMPTY_QUESTION_MESSAGE = "Prompt must not be empty."

OUT_OF_SCOPE_MARKER = "#E-OS"
OUT_OF_SCOPE_REPLY = "Sorry but that is outside my scope, how else can i help?"


def validate_question(question: str) -> None:
    """질문이 비어 있거나 공백 기준 30단어를 넘으면 InvalidInputError"""
    if not question or not question.strip():
        raise InvalidInputError(EMPTY_QUESTION_MESSAGE)
    if len(question.split(" ")) > MAX_QUESTION_WORDS:
        raise InvalidInputError(TOO_LONG_MESSAGE)


def build_reply(message: ModelResponse) -> Optional[str]:
    """
    모델 메시지를 사용자에게 돌려줄 문자열로 조립합니다.

    - content가 OUT_OF_SCOPE_MARKER이면 고정 안내 문구로 대체
      (SCOPE_RESTRICTION_RULE이 AI_RULES에 없으면 도달하지 않음)
    - content가 없고 tool_calls가 있으면 요청 순서대로 실행한 결과를 줄바꿈으로 연결
    - 그 외에는 content를 그대로 사용
    """
    content = message.content
    tool_calls = message.tool_calls or []

    if content == OUT_OF_SCOPE_MARKER:
        return OUT_OF_SCOPE_REPLY

    if not content and tool_calls:
        combined = ""
        for tool_call in tool_calls:
            logger.info("[TOOL CALL] %s", tool_call.function.name)
            result = tool_dispatcher.dispatch(
                tool_call.function.name,
                tool_call.function.arguments,
            )
            combined += f"{result}\n"
        return combined

    return content


class PromptService:
    def __init__(self, completion_service: CompletionService):
        self.completion_service = completion_service

    async def answer(self, question: str) -> Optional[str]:
        validate_question(question)
        message = await self.completion_service.request_completion(question)
        # SDK 메시지 객체를 속성 기반으로 ModelResponse에 매핑
        return build_reply(ModelResponse.model_validate(message, from_attributes=True))
