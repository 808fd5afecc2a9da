from fastapi import APIRouter

from core.schemas import HealthResponse

router = APIRouter(
    tags=["Default"],
    prefix="",
    responses={
        200: {"description": "서비스가 정상적으로 작동 중입니다"},
    }
)


@router.get(
    "/",
    response_model=HealthResponse,
    summary="API Health check",
    description="""
    **서비스가 실행 중인지 확인합니다.**

    외부 서비스(OpenAI, 데모 API)의 상태와 무관하게 항상 200을 반환하며,
    keep-alive 자기 핑의 대상이기도 합니다.

    **사용 예시:**
    ```bash
    curl -X GET "http://localhost:5000/"
    ```
    """,
    response_description="서비스 상태 메시지"
)
async def health_check():
    """서비스 상태 확인"""
    return HealthResponse(message="API is Live!")
