from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Book(Base):
    __tablename__ = "books"

    # 内部自增主键，不对外暴露
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 业务主键：唯一约束兜底并发创建的竞态
    book_id: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )
    book_name: Mapped[str] = mapped_column(String(255), nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return (
            f"Book(id={self.id!r}, book_id={self.book_id!r}, "
            f"book_name={self.book_name!r}, author_name={self.author_name!r})"
        )
