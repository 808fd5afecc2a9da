"""
Prompt Bot Backend 테스트 설정 및 공통 픽스처
"""
import os
import sys
from typing import List, Optional
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.app_factory import create_app
from core.schemas import ModelResponse, ToolCall, ToolCallFunction
from core.settings import Settings


def make_tool_call(name: str, arguments: str, call_id: str = "call_1") -> ToolCall:
    """모델의 Tool 호출 요청 생성"""
    return ToolCall(id=call_id, function=ToolCallFunction(name=name, arguments=arguments))


def make_completion(content: Optional[str] = None, tool_calls: Optional[List[ToolCall]] = None) -> Mock:
    """chat.completions.create 반환값과 같은 모양의 Mock 응답"""
    message = ModelResponse(content=content, tool_calls=tool_calls)
    return Mock(choices=[Mock(message=message)])


@pytest.fixture
def test_settings() -> Settings:
    """테스트용 설정 (keep-alive 비활성화)"""
    return Settings(
        base_url="http://testserver",
        openai_api_key="test-key",
        demo_api_url="https://httpbin.test",
        keep_alive_enabled=False,
    )


@pytest.fixture
def mock_llm_client():
    """Mock LLM 클라이언트"""
    mock_client = AsyncMock()
    mock_client.chat.completions.create = AsyncMock(return_value=make_completion(content="Test response"))
    return mock_client


@pytest.fixture
def app(test_settings, mock_llm_client) -> FastAPI:
    return create_app(settings=test_settings, llm_client=mock_llm_client)


@pytest.fixture
def client(app):
    """FastAPI 테스트 클라이언트"""
    # 처리되지 않은 예외도 500 응답으로 받기 위해 raise_server_exceptions=False
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def completion_factory():
    """make_completion 헬퍼"""
    return make_completion


@pytest.fixture
def tool_call_factory():
    """make_tool_call 헬퍼"""
    return make_tool_call
