import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    EMPLOYEE_SOURCE_URL: str = "https://dummyjson.com/users"
    EMPLOYEE_SOURCE_LIMIT: int = 20
    EMPLOYEE_SOURCE_TIMEOUT: float = 10.0
    EMPLOYEE_RANDOM_SEED: int | None = None

    ITEMS_PER_PAGE: int = 9

    AVATAR_BASE_URL: str = "https://api.dicebear.com/7.x/avataaars/svg"

    AUTH_SECRET_KEY: str = ""
    AUTH_DEMO_PASSWORD: str = "password123"
    AUTH_TOKEN_TTL_MINUTES: int = 60

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
