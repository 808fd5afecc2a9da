import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.demo_api import router as demo_router
from api.health_api import router as health_router
from api.prompt_api import router as prompt_router
from core.exceptions import InvalidInputError, NotFoundError, UpstreamError
from core.lifespan import lifespan
from core.llm_client import create_llm_client
from core.settings import Settings
from services.completion_service import AI_RULES, CompletionService
from services.demo_api_service import DemoApiService
from services.prompt_service import PromptService
from tools.basic_tools import available_tools

logger = logging.getLogger(__name__)


class AppFactory:
    """FastAPI 애플리케이션 생성 및 초기화를 담당하는 팩토리 클래스"""

    def __init__(self, settings: Optional[Settings] = None, llm_client=None):
        self.settings = settings or Settings.from_env()
        self.llm_client = llm_client

    def build_services(self, app: FastAPI):
        """서비스 생성 후 app.state에 등록 (의존성 주입용)"""
        llm_client = self.llm_client or create_llm_client(self.settings)
        completion_service = CompletionService(
            client=llm_client,
            model=self.settings.openai_model,
            rules=AI_RULES,
            tools=available_tools,
        )
        app.state.settings = self.settings
        app.state.prompt_service = PromptService(completion_service)
        app.state.demo_api_service = DemoApiService(self.settings.demo_api_url)

    def create_app(self) -> FastAPI:
        """FastAPI 애플리케이션 생성 및 설정"""
        expose_docs = self.settings.expose_docs

        app = FastAPI(
            title="Prompt Bot Backend",
            description=(
                "Single-service template for faster idea testing and prototyping. "
                "It contains an OpenAI bot with in-house tool functions, one demo root API call, "
                "basic async error handling, one demo httpx call, a keep-alive ping and .env support."
            ),
            version="1.0.0",
            docs_url="/docs" if expose_docs else None,
            redoc_url="/redoc" if expose_docs else None,
            openapi_url="/openapi.json" if expose_docs else None,
            servers=[{"url": self.settings.base_url}],
            lifespan=lifespan,
        )

        self.build_services(app)

        # 미들웨어 추가
        self._add_middleware(app)

        # 예외 핸들러 등록
        self._add_exception_handlers(app)

        # 라우터 등록
        self._register_routers(app)

        return app

    def _add_middleware(self, app: FastAPI):
        """미들웨어 추가"""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        # 요청 로깅 미들웨어 추가
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start_time = time.time()

            if request.method == "POST":
                try:
                    body = await request.body()
                    if body:
                        logger.info(
                            f"📝 {request.method} {request.url.path} body: {body.decode('utf-8')[:500]}..."
                        )
                except Exception as e:
                    logger.warning(f"⚠️ Could not read request body: {e}")

            response = await call_next(request)

            process_time = time.time() - start_time
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} - {process_time * 1000:.3f} ms"
            )
            return response

    def _add_exception_handlers(self, app: FastAPI):
        """예외 → JSON 응답 매핑"""

        @app.exception_handler(InvalidInputError)
        async def invalid_input_handler(request: Request, exc: InvalidInputError):
            return JSONResponse(status_code=400, content={"success": False, "message": exc.message})

        @app.exception_handler(RequestValidationError)
        async def validation_error_handler(request: Request, exc: RequestValidationError):
            errors = "; ".join(
                f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg')}"
                for err in exc.errors()
            )
            return JSONResponse(
                status_code=400,
                content={"success": False, "message": f"Invalid request body: {errors}"},
            )

        @app.exception_handler(UpstreamError)
        async def upstream_error_handler(request: Request, exc: UpstreamError):
            logger.error(f"Upstream failure on {request.url.path}: {exc.__cause__!r}")
            return JSONResponse(
                status_code=500,
                content={"success": False, "status": 500, "message": exc.message},
            )

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            # 메서드+경로가 일치하는 라우트가 없으면(404/405) 모두 404
            if exc.status_code in (404, 405):
                not_found = NotFoundError()
                return JSONResponse(status_code=404, content={"success": False, "message": not_found.message})
            return JSONResponse(
                status_code=exc.status_code,
                content={"success": False, "message": str(exc.detail)},
                headers=getattr(exc, "headers", None),
            )

        @app.exception_handler(Exception)
        async def unhandled_exception_handler(request: Request, exc: Exception):
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
            return JSONResponse(
                status_code=500,
                content={"success": False, "status": 500, "message": str(exc)},
            )

    def _register_routers(self, app: FastAPI):
        """라우터 등록"""
        app.include_router(health_router)
        app.include_router(demo_router)
        app.include_router(prompt_router)


def create_app(settings: Optional[Settings] = None, llm_client=None) -> FastAPI:
    """애플리케이션 팩토리를 사용하여 FastAPI 앱 생성"""
    factory = AppFactory(settings=settings, llm_client=llm_client)
    return factory.create_app()
