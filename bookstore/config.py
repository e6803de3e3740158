from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    # 项目信息
    APP_NAME: str = "Bookstore API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "图书 CRUD 与问候接口的 REST API"
    DEBUG: bool = False

    # 服务监听
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # 数据库
    DATABASE_DIR: Path = Path(__file__).resolve().parent.parent / "data"
    DATABASE_NAME: str = "bookstore.db"
    DATABASE_URL_OVERRIDE: str | None = None

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"sqlite+aiosqlite:///{self.DATABASE_DIR / self.DATABASE_NAME}"

    # CORS（允许任意来源，不带凭据）
    CORS_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False
    CORS_MAX_AGE: int = 3600

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
