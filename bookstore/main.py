import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookstore.config import settings
from bookstore.database import init_db
from bookstore.logging_config import setup_logging
from bookstore.routers import books, greeting
from bookstore.services.errors import ServiceError

# 导入所有 model 使 SQLAlchemy 注册表结构
import bookstore.models  # noqa: F401

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Books", "description": "Book CRUD operations API"},
    {"name": "Hello", "description": "Simple greeting API endpoints"},
    {"name": "System", "description": "健康检查"},
]

OPENAPI_CONTACT = {"name": "API Support", "email": "support@example.com"}

OPENAPI_LICENSE = {
    "name": "Apache 2.0",
    "url": "https://www.apache.org/licenses/LICENSE-2.0.html",
}

OPENAPI_SERVERS = [
    {"url": "/", "description": "Current Server (Relative URL)"},
    {"url": "http://localhost:8080", "description": "Local Development Server"},
]


def _format_validation_errors(exc: RequestValidationError) -> str:
    """把 FastAPI 的校验错误列表压成一行文本"""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期：启动时建表"""
    await init_db()
    logger.info(f"[启动] {settings.APP_NAME} {settings.APP_VERSION}")
    yield


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        openapi_tags=OPENAPI_TAGS,
        contact=OPENAPI_CONTACT,
        license_info=OPENAPI_LICENSE,
        servers=OPENAPI_SERVERS,
        lifespan=lifespan,
    )

    # CORS 中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH", "HEAD"],
        allow_headers=["*"],
        expose_headers=["*"],
        max_age=settings.CORS_MAX_AGE,
    )

    # 统一异常处理
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "code": exc.code},
        )

    # 请求体无法解析（非法 JSON、类型不符）统一按 400 返回
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        detail = _format_validation_errors(exc)
        logger.warning(f"[校验] {request.method} {request.url.path}: {detail}")
        return JSONResponse(
            status_code=400,
            content={"detail": detail, "code": "VALIDATION_ERROR"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[异常] {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "code": "INTERNAL_ERROR"},
        )

    # 注册路由
    app.include_router(books.router)
    app.include_router(greeting.router)

    @app.get("/health", tags=["System"])
    async def health_check():
        """健康检查接口"""
        return {
            "status": "ok",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()
