"""
기본적인 텍스트 처리 도구를 정의합니다.
"""
import logging
import re
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")

# --- Tool Implementations ---

def convert_to_upper_case(content: str) -> str:
    """
    입력된 텍스트를 대문자로 변환합니다.
    """
    logger.info("Converting to uppercase...")
    return "Uppercase: " + content.upper()

def reverse_string(content: str) -> str:
    """
    입력된 텍스트의 순서를 반대로 뒤집습니다.
    """
    logger.info("Reversing the string...")
    return "Reverse: " + content[::-1]

def replace_spaces_with_dashes(content: str) -> str:
    """
    연속된 공백 문자를 하나의 대시(-)로 바꿉니다.
    """
    logger.info("Replacing spaces with dashes...")
    return "Dashed: " + _WHITESPACE_RUN.sub("-", content)

# --- LLM에 제공될 Tool 명세 (OpenAI 호환) ---

def _content_tool_schema(name: str, description: str, content_description: str) -> Dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": {
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": content_description,
                    }
                },
                "required": ["content"],
            },
        },
    }

convert_to_upper_case_schema = _content_tool_schema(
    "convertToUpperCase",
    "Converts the user content to uppercase.",
    "The content to convert to uppercase.",
)

reverse_string_schema = _content_tool_schema(
    "reverseString",
    "Reverses the string.",
    "The content to reverse.",
)

replace_spaces_with_dashes_schema = _content_tool_schema(
    "replaceSpacesWithDashes",
    "Replaces spaces with dashes in the string.",
    "The content to modify.",
)

# --- Registry에 등록할 변수 ---

# 모델에 광고되는 Tool 목록 (순서 유지)
available_tools: List[Dict[str, Any]] = [
    convert_to_upper_case_schema,
    reverse_string_schema,
    replace_spaces_with_dashes_schema,
]

# Tool 이름과 실제 함수 구현을 매핑
tool_functions: Dict[str, Callable[[str], str]] = {
    "convertToUpperCase": convert_to_upper_case,
    "reverseString": reverse_string,
    "replaceSpacesWithDashes": replace_spaces_with_dashes,
}
