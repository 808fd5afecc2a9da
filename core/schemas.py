from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- OpenAI 호환 Tool Calling 스키마 ---

class Function(BaseModel):
    """Tool로 호출될 함수의 명세를 정의합니다."""
    name: str
    description: Optional[str] = None
    parameters: Dict[str, Any]

class Tool(BaseModel):
    """LLM이 사용할 수 있는 Tool의 명세를 정의합니다."""
    type: Literal["function"] = "function"
    function: Function

class ToolCallFunction(BaseModel):
    """모델이 호출하려는 함수의 이름과 인자를 담습니다."""
    name: str
    arguments: str

class ToolCall(BaseModel):
    """모델의 Tool 호출 요청 정보를 담습니다."""
    id: str
    type: Literal["function"] = "function"
    function: ToolCallFunction

class ModelResponse(BaseModel):
    """
    완성 API가 돌려주는 assistant 메시지와 같은 모양입니다.
    content와 tool_calls 중 하나만 의미를 갖는 것이 일반적입니다.
    """
    role: Literal["assistant"] = "assistant"
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None


# --- HTTP 요청/응답 스키마 ---

class PromptRequest(BaseModel):
    question: str = Field(..., description="The question to prompt the OpenAI bot.")

    model_config = ConfigDict(
        json_schema_extra={"example": {"question": "What is the capital of France?"}}
    )

class PromptResponse(BaseModel):
    success: bool = True
    message: str = "Bot responded successfully"
    data: Optional[str] = None

class HealthResponse(BaseModel):
    message: str = "API is Live!"

class DemoApiResponse(BaseModel):
    message: str
    data: int

class DemoApiErrorResponse(BaseModel):
    error: str

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    status: Optional[int] = None
