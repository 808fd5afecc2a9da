"""
프로세스 시작 시 한 번 읽어 들이는 애플리케이션 설정입니다.
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


class Settings(BaseModel):
    """환경 변수 기반 설정 (생성 이후 변경 불가)"""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 5000
    base_url: str = "http://localhost:5000"
    app_env: str = ""
    enable_docs: bool = True

    openai_api_key: str = "xxxx"
    openai_model: str = "gpt-4o-mini"

    demo_api_url: str = "https://httpbin.org"

    keep_alive_enabled: bool = True
    keep_alive_interval_seconds: float = 600

    @property
    def is_development(self) -> bool:
        return self.app_env in {"development", "local"}

    @property
    def expose_docs(self) -> bool:
        return self.enable_docs or self.is_development

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """
        .env 파일을 로드한 뒤 환경 변수로부터 설정을 생성합니다.
        """
        load_dotenv(env_file)
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            base_url=os.getenv("BASE_URL", "http://localhost:5000"),
            app_env=os.getenv("APP_ENV", "").lower(),
            enable_docs=_env_flag("ENABLE_DOCS", "true"),
            openai_api_key=os.getenv("OPEN_AI_KEY") or os.getenv("OPENAI_API_KEY") or "xxxx",
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            demo_api_url=os.getenv("DEMO_API_URL", "https://httpbin.org"),
            keep_alive_enabled=_env_flag("KEEP_ALIVE_ENABLED", "true"),
            keep_alive_interval_seconds=float(os.getenv("KEEP_ALIVE_INTERVAL_SECONDS", "600")),
        )
