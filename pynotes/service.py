
import enum
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from sqlalchemy.orm import Session

from . import repo
from . import messages
from .errors import NotesError, NotFound, StoreError, UsageError, ValidationError
from .schemas import NoteField, NoteOut

log = logging.getLogger(__name__)

Ask = Callable[[str], str]
Clock = Callable[[], datetime]

# как strconv.Atoi: только ASCII-цифры, без "_" и пробелов внутри
_ID_RE = re.compile(r"\+?[0-9]+")
# колонка id - 32-битный INTEGER / serial
MAX_NOTE_ID = 2**31 - 1


class FieldOutcome(enum.Enum):
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class UpdateReport:
    note_id: int
    outcomes: dict[NoteField, FieldOutcome] = field(default_factory=dict)
    errors: dict[NoteField, NotesError] = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return FieldOutcome.FAILED in self.outcomes.values()


def parse_note_id(raw: str | None) -> int:
    """Идентификатор из командной строки: только положительное целое."""
    if raw is None:
        raise UsageError(messages.BAD_ID)
    raw = raw.strip()
    if not _ID_RE.fullmatch(raw):
        raise UsageError(messages.BAD_ID)
    note_id = int(raw)
    if not 0 < note_id <= MAX_NOTE_ID:
        raise UsageError(messages.BAD_ID)
    return note_id


class NoteService:
    """
    Сценарии команд поверх хранилища.

    session -- открытая сессия SQLAlchemy, ею владеет вызывающий код;
    ask     -- источник ввода, возвращает строку на подсказку;
    clock   -- источник текущего времени для меток created_at/updated_at.
    """

    def __init__(self, session: Session, ask: Ask, clock: Clock = repo.utcnow):
        self.session = session
        self.ask = ask
        self.clock = clock

    def _require(self, raw_id: str | None) -> int:
        note_id = parse_note_id(raw_id)
        if not repo.note_exists(self.session, note_id=note_id):
            raise NotFound(messages.NOT_FOUND)
        return note_id

    def add(self) -> NoteOut:
        title = self.ask(messages.ASK_TITLE).strip()
        body = self.ask(messages.ASK_BODY).strip()
        if not title:
            raise ValidationError(messages.EMPTY_TITLE)
        note = repo.create_note(self.session, title=title, body=body, now=self.clock())
        log.info("Created note id=%s", note.id)
        return note

    def get(self, raw_id: str | None) -> NoteOut:
        note_id = self._require(raw_id)
        return repo.get_note(self.session, note_id=note_id)

    def list(self) -> list[NoteOut]:
        notes = repo.list_notes(self.session)
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Listed %s of %s stored notes", len(notes), repo.count_notes(self.session))
        return notes

    def update(self, raw_id: str | None) -> UpdateReport:
        note_id = self._require(raw_id)
        report = UpdateReport(note_id)
        for fld, prompt in ((NoteField.TITLE, messages.ASK_NEW_TITLE),
                            (NoteField.BODY, messages.ASK_NEW_BODY)):
            value = self.ask(prompt).strip()
            if not value:
                report.outcomes[fld] = FieldOutcome.SKIPPED
                continue
            try:
                if not repo.update_note_field(self.session, note_id=note_id, field=fld, value=value, now=self.clock()):
                    # заметку удалили между проверкой и записью
                    raise NotFound(messages.NOT_FOUND)
            except (StoreError, NotFound) as e:
                # ошибка по одному полю не мешает обновить другое
                log.warning("Failed to update %s of note id=%s", fld.value, note_id, exc_info=e)
                report.outcomes[fld] = FieldOutcome.FAILED
                report.errors[fld] = e
                continue
            log.info("Updated %s of note id=%s", fld.value, note_id)
            report.outcomes[fld] = FieldOutcome.UPDATED
        return report

    def remove(self, raw_id: str | None) -> int:
        note_id = self._require(raw_id)
        if not repo.delete_note(self.session, note_id=note_id):
            raise NotFound(messages.NOT_FOUND)
        log.info("Deleted note id=%s", note_id)
        return note_id
