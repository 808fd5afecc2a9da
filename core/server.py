import logging

import uvicorn

from core.logging_config import get_simple_logging_config
from core.settings import Settings

logger = logging.getLogger(__name__)


class ServerRunner:
    """서버 실행을 담당하는 클래스"""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings.from_env()

    def get_reload_dirs(self):
        """개발 모드에서 감시할 디렉토리 목록"""
        return ["api", "core", "services", "tools"]

    def get_reload_excludes(self):
        """개발 모드에서 제외할 디렉토리/파일 목록"""
        return [".*", ".py[cod]", "__pycache__", ".env", ".venv", ".git", "logs"]

    def run(self):
        """서버 실행"""
        host = self.settings.host
        port = self.settings.port
        is_development = self.settings.is_development

        logger.info(
            f"🚀 Starting server in {'development (hot-reload enabled)' if is_development else 'production'} mode."
        )
        logger.info(f"Server running on port {port}")

        uvicorn.run(
            "main:app",
            host=host,
            port=port,
            reload=is_development,
            reload_dirs=self.get_reload_dirs() if is_development else None,
            reload_excludes=self.get_reload_excludes() if is_development else None,
            access_log=True,
            log_level="info",
            log_config=get_simple_logging_config(),
        )


def run_server():
    """서버 실행 함수"""
    runner = ServerRunner()
    runner.run()


if __name__ == "__main__":
    run_server()
