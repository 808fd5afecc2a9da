import os
from pathlib import Path

# Uvicorn's default format for access logs, with slight modification for clarity
# See: https://github.com/encode/uvicorn/blob/master/uvicorn/logging.py
ACCESS_LOG_FORMAT = '%(levelname)s: %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
DEFAULT_LOG_FORMAT = "%(levelname)s:     %(asctime)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10485760  # 10MB


def get_log_directory() -> str:
    """로그 디렉토리 경로를 반환합니다."""
    # LOG_DIR 지정 > Docker(/app/logs) > 로컬(./logs)
    configured = os.getenv("LOG_DIR")
    if configured:
        return configured
    if os.path.exists("/app/logs"):
        return "/app/logs"
    return "./logs"


def ensure_log_directory() -> str:
    """로그 디렉토리가 존재하는지 확인하고 없으면 생성합니다."""
    log_dir = get_log_directory()
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    return log_dir


def _rotating_file(filename: str, formatter: str, level: str = "INFO") -> dict:
    return {
        "formatter": formatter,
        "class": "logging.handlers.RotatingFileHandler",
        "filename": filename,
        "maxBytes": MAX_LOG_BYTES,
        "backupCount": 5,
        "encoding": "utf-8",
        "level": level,
    }


def get_logging_config(log_dir: str | None = None) -> dict:
    """
    애플리케이션 전체 로깅 설정 (logging.config.dictConfig 용)

    콘솔(stdout) 출력과 함께 app.log / access.log / error.log 를 회전 파일로 남깁니다.
    """
    log_dir = log_dir or ensure_log_directory()
    library_logger = {"handlers": ["default", "file_app"], "level": "WARNING", "propagate": False}
    return {
        "version": 1,
        "disable_existing_loggers": False, # Keep existing loggers like uvicorn's
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": DEFAULT_LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": ACCESS_LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
            "detailed": {
                "format": "%(levelname)s: %(asctime)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": DATE_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "formatter": "access",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
            "file_app": _rotating_file(f"{log_dir}/app.log", "detailed"),
            "file_access": _rotating_file(f"{log_dir}/access.log", "access"),
            "file_error": _rotating_file(f"{log_dir}/error.log", "detailed", level="ERROR"),
        },
        "loggers": {
            "": { # Root logger
                "handlers": ["default", "file_app", "file_error"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["default", "file_app", "file_error"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["access", "file_access"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn": {
                "handlers": ["default", "file_app"],
                "level": "INFO",
                "propagate": False,
            },
            "httpx": library_logger,
            "openai": library_logger,
        },
    }


def get_simple_logging_config() -> dict:
    """uvicorn.run(log_config=...)에 넘기는 간단한 로깅 설정 (파일 회전 없음)"""
    log_dir = ensure_log_directory()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s: %(asctime)s - %(name)s - %(message)s",
                "datefmt": DATE_FORMAT,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": ACCESS_LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": "INFO",
            },
            "file_app": {
                "class": "logging.FileHandler",
                "filename": f"{log_dir}/app.log",
                "formatter": "default",
                "level": "INFO",
                "encoding": "utf-8",
            },
            "file_error": {
                "class": "logging.FileHandler",
                "filename": f"{log_dir}/error.log",
                "formatter": "default",
                "level": "ERROR",
                "encoding": "utf-8",
            },
            "access_console": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "level": "INFO",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console", "file_app", "file_error"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["access_console"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console", "file_app", "file_error"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }
