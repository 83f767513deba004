# school_admin/core/config.py
"""Application configuration using Pydantic."""
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = 'school_admin'
    app_version: str = '1.0.0'
    environment: str = 'development'
    log_level: str = 'info'
    allowed_origins: List[str] = ['*']

    # API surface
    api_prefix: str = '/api'

    # Data source: "memory" keeps everything in-process, "remote" talks to a REST backend
    data_source: Literal['memory', 'remote'] = 'memory'
    remote_base_url: Optional[str] = None
    request_timeout: float = 10.0

    # In-memory store
    mock_latency_ms: int = 0
    seed_demo_data: bool = True

    # Pagination
    default_page_size: int = 10

    model_config = {
        'env_file': '.env',
        'env_prefix': 'SCHOOL_ADMIN_',
        'extra': 'ignore'
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
