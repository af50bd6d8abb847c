
import enum
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


class NoteField(str, enum.Enum):
    """Поля заметки, которые можно менять командой update."""
    TITLE = "title"
    BODY = "body"


class NoteOut(BaseModel):
    """Заметка в том виде, в котором её отдаёт хранилище."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    title: str
    body: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _assume_utc(cls, v):
        # из SQLite приходит текст, из PostgreSQL уже datetime
        if isinstance(v, str):
            v = datetime.fromisoformat(v)
        # SQLite теряет таймзону, храним всегда в UTC
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def modified(self) -> bool:
        return self.updated_at != self.created_at
