
from datetime import datetime
from typing import Iterable
from zoneinfo import ZoneInfo

from .schemas import NoteOut
from . import messages

DEFAULT_ZONE = "Asia/Novosibirsk"
DEFAULT_TIME_FORMAT = "%d.%m.%Y %H:%M"

class NotePresenter:
    """Текстовый вывод заметок: часовой пояс и формат даты задаются снаружи."""

    def __init__(self, zone: str = DEFAULT_ZONE, time_format: str = DEFAULT_TIME_FORMAT):
        self.zone = ZoneInfo(zone)
        self.time_format = time_format

    def format_time(self, ts: datetime) -> str:
        return ts.astimezone(self.zone).strftime(self.time_format)

    def render_note(self, note: NoteOut, *, show_text: bool) -> list[str]:
        lines = [
            f"{messages.LABEL_ID}{note.id}",
            f"{messages.LABEL_TITLE}{note.title}",
            f"{messages.LABEL_CREATED}{self.format_time(note.created_at)}",
        ]
        if note.modified:
            lines.append(f"{messages.LABEL_UPDATED}{self.format_time(note.updated_at)}")
        if show_text:
            lines.append(messages.LABEL_TEXT)
            lines.append(note.body)
        return lines

    def render(self, notes: Iterable[NoteOut], *, show_text: bool, show_total: bool) -> str:
        notes = list(notes)
        lines: list[str] = []
        for n in notes:
            lines.extend(self.render_note(n, show_text=show_text))
            # разделитель только когда заметок не одна
            if len(notes) != 1:
                lines.append("")
        if show_total:
            lines.append(f"{messages.LABEL_TOTAL}{len(notes)}")
        return "\n".join(lines)
