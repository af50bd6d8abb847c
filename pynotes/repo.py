
import logging
from datetime import datetime, timezone

from sqlalchemy import select, func, update, delete, type_coerce, String
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from .errors import NotFound, StoreError
from .models import Note
from .schemas import NoteField, NoteOut
from . import messages

log = logging.getLogger(__name__)

# метки времени читаем как текст: разбор в NoteOut, битое значение не роняет выборку
_COLUMNS = (
    Note.id, Note.title, Note.body,
    type_coerce(Note.created_at, String).label("created_at"),
    type_coerce(Note.updated_at, String).label("updated_at"),
)

_UPDATE_FAILED = {
    NoteField.TITLE: messages.TITLE_UPDATE_FAILED,
    NoteField.BODY: messages.BODY_UPDATE_FAILED,
}

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _to_note(row) -> NoteOut:
    return NoteOut.model_validate(dict(row._mapping))

def create_note(s: Session, *, title: str, body: str, now: datetime | None = None) -> NoteOut:
    now = now or utcnow()
    n = Note(title=title, body=body, created_at=now, updated_at=now)
    try:
        s.add(n); s.commit(); s.refresh(n)
    except SQLAlchemyError as e:
        s.rollback()
        raise StoreError(messages.CREATE_FAILED) from e
    log.debug("Inserted note id=%s", n.id)
    return NoteOut.model_validate(n)

def list_notes(s: Session) -> list[NoteOut]:
    q = select(*_COLUMNS).order_by(Note.created_at, Note.id)
    try:
        rows = s.execute(q).all()
    except SQLAlchemyError as e:
        raise StoreError(messages.LIST_FAILED) from e
    notes = []
    for row in rows:
        # битую строку пропускаем, остальной список выводим
        try:
            notes.append(_to_note(row))
        except ValueError:
            log.warning("Skipping unreadable note row id=%s", row.id, exc_info=True)
    return notes

def get_note(s: Session, *, note_id: int) -> NoteOut:
    try:
        row = s.execute(select(*_COLUMNS).where(Note.id == note_id)).first()
    except SQLAlchemyError as e:
        raise StoreError(messages.GET_FAILED) from e
    if row is None:
        raise NotFound(messages.NOT_FOUND)
    try:
        return _to_note(row)
    except ValueError as e:
        raise StoreError(messages.READ_FAILED) from e

def note_exists(s: Session, *, note_id: int) -> bool:
    try:
        n = s.scalar(select(func.count()).select_from(Note).where(Note.id == note_id))
    except SQLAlchemyError as e:
        raise StoreError(messages.CHECK_FAILED) from e
    return n == 1

def update_note_field(s: Session, *, note_id: int, field: NoteField, value: str,
                      now: datetime | None = None) -> bool:
    values = {field.value: value, "updated_at": now or utcnow()}
    try:
        res = s.execute(update(Note).where(Note.id == note_id).values(**values))
        s.commit()
    except SQLAlchemyError as e:
        s.rollback()
        raise StoreError(_UPDATE_FAILED[field]) from e
    return res.rowcount > 0

def delete_note(s: Session, *, note_id: int) -> bool:
    try:
        res = s.execute(delete(Note).where(Note.id == note_id))
        s.commit()
    except SQLAlchemyError as e:
        s.rollback()
        raise StoreError(messages.DELETE_FAILED) from e
    return res.rowcount > 0

def count_notes(s: Session) -> int:
    try:
        return s.scalar(select(func.count()).select_from(Note)) or 0
    except SQLAlchemyError as e:
        raise StoreError(messages.LIST_FAILED) from e
