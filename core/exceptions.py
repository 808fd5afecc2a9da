"""
애플리케이션 예외 정의
"""


class AppError(Exception):
    """애플리케이션 예외의 기반 클래스"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(AppError):
    """사용자 입력이 전제 조건을 만족하지 않음 (400)"""


class UpstreamError(AppError):
    """완성 API 또는 데모 API 호출 실패 (500)"""


class MalformedArgumentsError(AppError):
    """도구 호출 인자를 JSON 객체로 해석할 수 없음"""


class NotFoundError(AppError):
    """일치하는 라우트가 없음 (404)"""

    def __init__(self, message: str = "API route does not exist"):
        super().__init__(message)
