"""
모델이 요청한 도구를 찾아 실행하고, 그 결과를 반환하는 서비스입니다.
"""
import json
import logging
from typing import Any, Callable, Dict, Optional

from core.exceptions import MalformedArgumentsError
from tools.basic_tools import tool_functions

logger = logging.getLogger(__name__)

UNKNOWN_TOOL_RESULT = "Unable to perform task"


def _parse_content(tool_name: str, arguments_json: str) -> str:
    try:
        arguments: Any = json.loads(arguments_json)
    except (TypeError, ValueError) as e:
        raise MalformedArgumentsError(
            f"Invalid arguments for tool '{tool_name}': {e}"
        ) from e

    if not isinstance(arguments, dict):
        raise MalformedArgumentsError(
            f"Invalid arguments for tool '{tool_name}': expected a JSON object"
        )

    content = arguments.get("content")
    if not isinstance(content, str):
        raise MalformedArgumentsError(
            f"Invalid arguments for tool '{tool_name}': missing string field 'content'"
        )
    return content


def dispatch(
    tool_name: str,
    arguments_json: str,
    functions: Optional[Dict[str, Callable[[str], str]]] = None,
) -> str:
    """
    도구 이름에 해당하는 함수를 호출하고 결과 문자열을 반환합니다.

    알 수 없는 도구 이름은 인자와 관계없이 UNKNOWN_TOOL_RESULT를 반환하며,
    알려진 도구의 인자를 해석할 수 없으면 MalformedArgumentsError가 발생합니다.
    """
    registry = tool_functions if functions is None else functions
    func = registry.get(tool_name)
    if func is None:
        logger.warning("Unknown tool requested: %s", tool_name)
        return UNKNOWN_TOOL_RESULT

    content = _parse_content(tool_name, arguments_json)
    return func(content)
