from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BookRequest(BaseModel):
    """创建 / 更新图书的请求体

    字段在解析层全部可选，必填校验交给 service 层，保证缺字段返回 400 而不是 422。
    """

    book_id: str | None = Field(None, description="图书业务 ID，全局唯一", examples=["B001"])
    book_name: str | None = Field(None, description="书名", examples=["The Great Gatsby"])
    author_name: str | None = Field(None, description="作者", examples=["F. Scott Fitzgerald"])

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }


class BookResponse(BaseModel):
    book_id: str = Field(..., description="图书业务 ID", examples=["B001"])
    book_name: str = Field(..., examples=["The Great Gatsby"])
    author_name: str = Field(..., examples=["F. Scott Fitzgerald"])

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
