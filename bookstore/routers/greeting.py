import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from bookstore.schemas.error import ErrorResponse
from bookstore.schemas.greeting import NameRequest
from bookstore.services.errors import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hi", tags=["Hello"])


@router.get("", response_class=PlainTextResponse, summary="Get greeting")
async def get_hello():
    return "Hello"


@router.post(
    "",
    response_class=PlainTextResponse,
    summary="Post personalized greeting",
    responses={400: {"model": ErrorResponse}},
)
async def post_hello(body: NameRequest | None = None):
    """按名字返回问候语，原样拼接不做裁剪或转义；缺少 name 返回 400"""
    if body is None or body.name is None:
        logger.warning("[问候] 校验失败: Name is required")
        raise ValidationError("Name is required")
    return "Hi " + body.name
