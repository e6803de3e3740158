from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_db
from bookstore.schemas.book import BookRequest, BookResponse
from bookstore.schemas.error import ErrorResponse
from bookstore.services import book_service

router = APIRouter(prefix="/api/books", tags=["Books"])


@router.post(
    "",
    response_model=BookResponse,
    status_code=201,
    summary="Create a new book",
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_book(
    body: BookRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """创建图书，bookId 必须唯一"""
    book = await book_service.create_book(db, body or BookRequest())
    return BookResponse.model_validate(book)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get book by ID",
    responses={404: {"model": ErrorResponse}},
)
async def get_book(book_id: str, db: AsyncSession = Depends(get_db)):
    book = await book_service.get_book(db, book_id)
    return BookResponse.model_validate(book)


@router.get("", response_model=list[BookResponse], summary="Get all books")
async def list_books(db: AsyncSession = Depends(get_db)):
    books = await book_service.list_books(db)
    return [BookResponse.model_validate(b) for b in books]


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_book(
    book_id: str,
    body: BookRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """更新书名与作者（bookId 不可修改）"""
    book = await book_service.update_book(db, book_id, body or BookRequest())
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    response_class=PlainTextResponse,
    summary="Delete a book",
    responses={404: {"model": ErrorResponse}},
)
async def delete_book(book_id: str, db: AsyncSession = Depends(get_db)):
    await book_service.delete_book(db, book_id)
    return f"Book with ID '{book_id}' deleted successfully"
