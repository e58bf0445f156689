# -*- coding: utf-8 -*-
import logging
import os

from dotenv import load_dotenv

load_dotenv()


class SwaggerConfig:
    TITLE = "HireLoop API"
    DESCRIPTION = "API for HireLoop: jobs, candidates, interviews, outreach & AI-assisted recruiting"
    VERSION = "1.0.0"


class DBConfig:
    URL = os.getenv("DATABASE_URL", "sqlite:///./data/hireloop.db")
    ECHO = os.getenv("DATABASE_ECHO", "False").lower() == "true"


class LLMConfig:
    API_KEY = os.getenv("OPENAI_API_KEY") or os.getenv("VITE_OPENAI_API_KEY", "")
    MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    # None keeps the SDK default
    TIMEOUT = float(os.environ["LLM_TIMEOUT"]) if os.getenv("LLM_TIMEOUT") else None


class UploadConfig:
    MAX_BYTES = int(os.getenv("UPLOAD_MAX_BYTES", 5 * 1024 * 1024))  # 5MB
    MAX_RESUME_CHARS = 50000
    TRUNCATION_NOTICE = (
        "\n\n[Resume truncated due to length. "
        "Please upload a shorter resume or plain text file.]"
    )


class PipelineConfig:
    TARGET_CANDIDATES = 30
    HEALTHY_AT = 70
    AT_RISK_AT = 40

    STAGES = ("new", "screening", "interview", "offer", "hired", "rejected")
    JOB_STATUSES = ("draft", "published", "closed")
    INTEGRATION_STATUSES = ("connected", "disconnected")

    DEFAULT_FIT_SCORE = 70
    DEFAULT_SOURCING_THRESHOLD = 70
    SOURCED_PER_RUN = 3


class CORSConfig:
    ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")


class ServerConfig:
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3001))


class LogConfig:
    LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging() -> None:
    logging.basicConfig(level=LogConfig.LEVEL, format=LogConfig.FORMAT)
