"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Content limits (characters)
    MESSAGE_CHAR_LIMIT = int(os.getenv("MESSAGE_CHAR_LIMIT", "2000"))
    POST_CHAR_LIMIT = int(os.getenv("POST_CHAR_LIMIT", "500"))
    COMMENT_CHAR_LIMIT = int(os.getenv("COMMENT_CHAR_LIMIT", "200"))

    # Auth
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "alumni-connect-auth")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "alumni-connect")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )
