"""
봇 질문 API 통합 테스트
"""
import re

import httpx
import openai
import pytest
from fastapi.testclient import TestClient


@pytest.mark.integration
@pytest.mark.api
class TestPromptBotAPI:
    """POST /prompt-bot 테스트"""

    def test_text_response_passthrough(self, client: TestClient, mock_llm_client, completion_factory):
        """모델의 텍스트 응답을 그대로 전달"""
        mock_llm_client.chat.completions.create.return_value = completion_factory(
            content="Paris is the capital of France."
        )

        response = client.post("/prompt-bot", json={"question": "What is the capital of France?"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Bot responded successfully",
            "data": "Paris is the capital of France.",
        }
        kwargs = mock_llm_client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"][1] == {"role": "user", "content": "What is the capital of France?"}

    def test_reverse_tool_call(self, client: TestClient, mock_llm_client, completion_factory, tool_call_factory):
        """reverseString 도구 호출 결과"""
        mock_llm_client.chat.completions.create.return_value = completion_factory(
            tool_calls=[tool_call_factory("reverseString", '{"content":"abc"}')]
        )

        response = client.post("/prompt-bot", json={"question": "Reverse abc"})

        assert response.status_code == 200
        assert response.json()["data"] == "Reverse: cba\n"

    def test_multiple_tool_calls(self, client: TestClient, mock_llm_client, completion_factory, tool_call_factory):
        mock_llm_client.chat.completions.create.return_value = completion_factory(
            tool_calls=[
                tool_call_factory("convertToUpperCase", '{"content":"hello world"}', "call_1"),
                tool_call_factory("replaceSpacesWithDashes", '{"content":"hello world"}', "call_2"),
            ]
        )

        response = client.post("/prompt-bot", json={"question": "Uppercase and dash hello world"})

        assert response.json()["data"] == "Uppercase: HELLO WORLD\nDashed: hello-world\n"

    def test_unknown_tool_sentinel(self, client: TestClient, mock_llm_client, completion_factory, tool_call_factory):
        mock_llm_client.chat.completions.create.return_value = completion_factory(
            tool_calls=[tool_call_factory("translate", '{"content":"hola"}')]
        )

        response = client.post("/prompt-bot", json={"question": "Translate hola"})

        assert response.status_code == 200
        assert response.json()["data"] == "Unable to perform task\n"

    def test_too_long_question_rejected(self, client: TestClient, mock_llm_client):
        """31단어 이상이면 400, 모델 호출 없음"""
        question = " ".join(["word"] * 31)

        response = client.post("/prompt-bot", json={"question": question})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Prompt was too long. Must be less than 31 words.",
        }
        mock_llm_client.chat.completions.create.assert_not_called()

    def test_thirty_word_question_accepted(self, client: TestClient):
        response = client.post("/prompt-bot", json={"question": " ".join(["word"] * 30)})
        assert response.status_code == 200

    def test_empty_question_rejected(self, client: TestClient, mock_llm_client):
        response = client.post("/prompt-bot", json={"question": ""})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Prompt must not be empty."}
        mock_llm_client.chat.completions.create.assert_not_called()

    def test_missing_question_rejected(self, client: TestClient):
        response = client.post("/prompt-bot", json={})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["message"].startswith("Invalid request body")

    def test_malformed_tool_arguments_returns_500(self, client: TestClient, mock_llm_client, completion_factory, tool_call_factory):
        """도구 인자 JSON 오류는 일반 500 응답"""
        mock_llm_client.chat.completions.create.return_value = completion_factory(
            tool_calls=[tool_call_factory("reverseString", "{not json")]
        )

        response = client.post("/prompt-bot", json={"question": "Reverse something"})

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["status"] == 500
        assert "reverseString" in data["message"]

    def test_upstream_failure_returns_500(self, client: TestClient, mock_llm_client):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        mock_llm_client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

        response = client.post("/prompt-bot", json={"question": "Hello?"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "status": 500,
            "message": "Failed to get a response from the completion service",
        }

    def test_server_keeps_serving_after_error(self, client: TestClient, mock_llm_client, completion_factory):
        mock_llm_client.chat.completions.create.side_effect = RuntimeError("boom")
        assert client.post("/prompt-bot", json={"question": "Hi"}).status_code == 500

        mock_llm_client.chat.completions.create.side_effect = None
        mock_llm_client.chat.completions.create.return_value = completion_factory(content="Hello!")
        response = client.post("/prompt-bot", json={"question": "Hi"})

        assert response.status_code == 200
        assert response.json()["data"] == "Hello!"


@pytest.mark.integration
@pytest.mark.api
class TestRequestLogging:
    """요청 로깅 미들웨어"""

    def test_request_line_logged(self, client: TestClient, caplog):
        with caplog.at_level("INFO", logger="core.app_factory"):
            response = client.post("/prompt-bot", json={"question": "What is the capital of France?"})

        assert response.status_code == 200
        messages = [r.getMessage() for r in caplog.records if r.name == "core.app_factory"]
        assert any(re.fullmatch(r"POST /prompt-bot 200 - \d+\.\d{3} ms", m) for m in messages)
        assert any(m.startswith("📝 POST /prompt-bot body: ") and "capital of France" in m for m in messages)

    def test_not_found_logged_with_status(self, client: TestClient, caplog):
        with caplog.at_level("INFO", logger="core.app_factory"):
            client.get("/missing")

        assert re.search(r"GET /missing 404 - \d+\.\d{3} ms", caplog.text)
