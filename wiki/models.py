from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import TEXT
from sqlmodel import Field as SQLField
from sqlmodel import SQLModel


class Page(SQLModel, table=True):
    __tablename__ = "pages"

    id: Optional[int] = SQLField(default=None, primary_key=True)
    name: str = SQLField(max_length=255, unique=True)
    content: str = SQLField(default="", sa_type=TEXT)


class IndexView(BaseModel):
    title: str
    pages: list[str] = Field(default_factory=list)


class PageView(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    id: int
    new_page: Literal["yes", "no"] = Field(alias="newPage")
    raw_content: str = Field(alias="rawContent", description="Markdown source")
    content: str = Field(..., description="Rendered HTML")
    timestamp: str


class HealthResponse(BaseModel):
    ok: bool


class ReadyResponse(BaseModel):
    ready: bool
    reason: str | None = None
