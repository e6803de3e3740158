import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.models.book import Book
from bookstore.schemas.book import BookRequest
from bookstore.services.book_store import BookStore, DuplicateBookIdError
from bookstore.services.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _require(value: str | None, message: str) -> str:
    if _is_blank(value):
        logger.warning(f"[图书] 校验失败: {message}")
        raise ValidationError(message)
    return value


async def create_book(db: AsyncSession, body: BookRequest) -> Book:
    """创建图书

    校验顺序：bookId → bookName → authorName → 唯一性。
    """
    book_id = _require(body.book_id, "Book ID is required")
    book_name = _require(body.book_name, "Book name is required")
    author_name = _require(body.author_name, "Author name is required")

    store = BookStore(db)
    if await store.exists_by_book_id(book_id):
        logger.warning(f"[图书] 重复的 bookId: {book_id}")
        raise ConflictError(f"Book with ID '{book_id}' already exists")

    try:
        book = await store.insert(
            Book(book_id=book_id, book_name=book_name, author_name=author_name)
        )
    except DuplicateBookIdError:
        # 存在性检查之后被并发请求抢先写入
        logger.warning(f"[图书] 唯一约束冲突: {book_id}")
        raise ConflictError(f"Book with ID '{book_id}' already exists")

    logger.info(f"[图书] 已创建 {book_id}")
    return book


async def get_book(db: AsyncSession, book_id: str) -> Book:
    book = await BookStore(db).find_by_book_id(book_id)
    if book is None:
        logger.warning(f"[图书] 未找到: {book_id}")
        raise NotFoundError(f"Book with ID '{book_id}' not found")
    return book


async def list_books(db: AsyncSession) -> list[Book]:
    return await BookStore(db).find_all()


async def update_book(db: AsyncSession, book_id: str, body: BookRequest) -> Book:
    """更新书名与作者，bookId 不可变

    先查存在性再校验字段：对不存在的图书发送非法请求体返回 404 而非 400。
    请求体中的 bookId 被忽略。
    """
    book = await get_book(db, book_id)

    book_name = _require(body.book_name, "Book name is required")
    author_name = _require(body.author_name, "Author name is required")

    book.book_name = book_name
    book.author_name = author_name

    book = await BookStore(db).update(book)
    logger.info(f"[图书] 已更新 {book_id}")
    return book


async def delete_book(db: AsyncSession, book_id: str) -> None:
    book = await get_book(db, book_id)
    await BookStore(db).delete(book)
    logger.info(f"[图书] 已删除 {book_id}")
