"""Content kinds and the immutable record a new file is rendered from"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentKind(str, Enum):
    """Restrict scaffolded content to a predefined set of kinds"""
    note = "note"
    post = "post"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def spec(self) -> "KindSpec":
        return KIND_SPECS[self]


@dataclass(frozen=True)
class KindSpec:
    """Everything that varies per content kind."""
    subdir:   str     # directory under the content root
    template: str     # template token, rendered as "<template>.html"
    taxonomy: str     # the single taxonomy line under `taxonomies:`


KIND_SPECS: dict[ContentKind, KindSpec] = {
    ContentKind.note: KindSpec(subdir="notes", template="note", taxonomy="tags: []"),
    ContentKind.post: KindSpec(subdir="posts", template="post", taxonomy="categories: []"),
}


class ContentRecord(BaseModel):
    """A note or post to be written; created once per invocation and never mutated."""
    model_config = ConfigDict(frozen=True)

    title: str
    kind: ContentKind
    created_at: datetime = Field(default_factory=lambda: datetime.now().astimezone())

    @field_validator("created_at")
    @classmethod
    def _require_offset(cls, v: datetime) -> datetime:
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("created_at must carry a UTC offset")
        return v

    @classmethod
    def create(cls, kind: ContentKind, title: str) -> "ContentRecord":
        """Build a record stamped with the current local time."""
        return cls(kind=kind, title=title)
