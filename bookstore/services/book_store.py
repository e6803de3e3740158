"""图书存储层 —— 对 books 表的最小能力接口"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.models.book import Book


class DuplicateBookIdError(Exception):
    """写入时触发 book_id 唯一约束"""

    def __init__(self, book_id: str):
        super().__init__(book_id)
        self.book_id = book_id


class BookStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, book: Book) -> Book:
        """写入新图书并分配内部 ID

        调用方应先做存在性检查；并发下漏过检查的重复写入由唯一约束拦截，
        此时回滚会话并抛 DuplicateBookIdError。
        """
        book_id = book.book_id
        self.db.add(book)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateBookIdError(book_id)
        await self.db.refresh(book)
        return book

    async def find_by_book_id(self, book_id: str) -> Book | None:
        result = await self.db.execute(select(Book).where(Book.book_id == book_id))
        return result.scalar_one_or_none()

    async def exists_by_book_id(self, book_id: str) -> bool:
        result = await self.db.execute(
            select(Book.id).where(Book.book_id == book_id).limit(1)
        )
        return result.first() is not None

    async def find_all(self) -> list[Book]:
        result = await self.db.execute(select(Book).order_by(Book.id))
        return list(result.scalars().all())

    async def update(self, book: Book) -> Book:
        """刷新已修改的 book_name / author_name"""
        await self.db.flush()
        await self.db.refresh(book)
        return book

    async def delete(self, book: Book) -> None:
        await self.db.delete(book)
        await self.db.flush()
