"""
Production entry point: the app wired to PostgreSQL through Prisma.

Usage:
    uvicorn alumni_connect.main:app --host 0.0.0.0 --port 5001
"""

from alumni_connect.config.logging_config import setup_logging
from alumni_connect.config.settings import Config
from alumni_connect.fastapi_app import create_fastapi_app
from alumni_connect.setup.ioc.container import create_container
from alumni_connect.setup.ioc.persistence import PersistenceProvider

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

app = create_fastapi_app(create_container(PersistenceProvider()))
