from pydantic import BaseModel, Field


class NameRequest(BaseModel):
    name: str | None = Field(None, description="问候对象的名字", examples=["Anji"])

    model_config = {"coerce_numbers_to_str": True}
