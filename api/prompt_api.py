"""
OpenAI 봇에 질문을 전달하는 API 엔드포인트입니다.
"""
import logging

from fastapi import APIRouter, Depends, Request

from core.schemas import ErrorResponse, PromptRequest, PromptResponse
from services.prompt_service import PromptService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["OpenAI"])


def get_prompt_service(request: Request) -> PromptService:
    return request.app.state.prompt_service


@router.post(
    "/prompt-bot",
    response_model=PromptResponse,
    summary="Prompt an OpenAI bot",
    description=(
        "Returns an object containing the bot's response to a provided question. "
        "The bot also performs three in-house functions, just ask the bot "
        "(Uppercase, Dash and Reverse)"
    ),
    responses={
        200: {"description": "Successful."},
        400: {"model": ErrorResponse, "description": "Bad request."},
        500: {"model": ErrorResponse, "description": "Completion service error."},
    },
)
async def prompt_bot(
    req: PromptRequest,
    prompt_service: PromptService = Depends(get_prompt_service),
):
    data = await prompt_service.answer(req.question)
    return PromptResponse(success=True, message="Bot responded successfully", data=data)
