from typing import Optional

from pydantic import BaseModel, Field


class BookIn(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    author: str = Field(min_length=1, max_length=255)
    genre: str = Field(min_length=1, max_length=64)
    published_year: int = Field(ge=0)
    price: float = Field(ge=0)
    in_stock: bool
    pages: Optional[int] = Field(default=None, ge=1)
    publisher: Optional[str] = Field(default=None, max_length=255)

    def to_document(self) -> dict:
        """Document as stored in Mongo; unset optional fields are left out."""
        return self.model_dump(exclude_none=True)
