import logging
from functools import wraps

import typer

from ..config import get_settings
from ..db import make_engine, make_session_factory, init_db
from ..errors import NotesError
from ..presenter import NotePresenter
from ..service import NoteService, FieldOutcome
from ..schemas import NoteField
from .. import messages

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_FIELD_DONE = {NoteField.TITLE: messages.TITLE_UPDATED, NoteField.BODY: messages.BODY_UPDATED}

app = typer.Typer(help=messages.APP_HELP, invoke_without_command=True, add_completion=False)

# ---- Единая точка обработки ошибок ----
def guarded(fn):
    @wraps(fn)
    def inner(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except NotesError as e:
            log.debug("Command failed: %s", e.message, exc_info=e)
            typer.echo(e.message, err=True)
            raise typer.Exit(code=e.exit_code)
    return inner

# ---- Ввод с консоли ----
def ask(prompt: str) -> str:
    return typer.prompt(prompt, default="", show_default=False, prompt_suffix="\n")

# ---- Хранилище и сервис на время одной команды ----
def open_service(ctx: typer.Context) -> NoteService:
    engine = make_engine()
    ctx.call_on_close(engine.dispose)
    init_db(engine)
    session = ctx.with_resource(make_session_factory(engine)())
    return NoteService(session, ask)

def presenter() -> NotePresenter:
    settings = get_settings()
    return NotePresenter(settings.TIMEZONE, settings.TIME_FORMAT)

def show(text: str) -> None:
    if text:
        typer.echo(text)

def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_settings().LOG_LEVEL.upper()
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.getLogger().setLevel(level)

# ---- Без подкоманды: краткий список ----
@app.callback()
@guarded
def root(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Подробные логи в stderr."),
):
    """Без команды выводит названия всех заметок и их количество."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return
    notes = open_service(ctx).list()
    show(presenter().render(notes, show_text=False, show_total=True))

@guarded
def get(ctx: typer.Context, note_id: str | None = typer.Argument(None, help="Номер заметки.")):
    """Получить заметку."""
    note = open_service(ctx).get(note_id)
    show(presenter().render([note], show_text=True, show_total=False))

@guarded
def add(ctx: typer.Context):
    """Создать новую заметку."""
    open_service(ctx).add()
    typer.echo(messages.CREATED)

@guarded
def update(ctx: typer.Context, note_id: str | None = typer.Argument(None, help="Номер заметки.")):
    """Обновить заметку."""
    report = open_service(ctx).update(note_id)
    for fld, outcome in report.outcomes.items():
        if outcome is FieldOutcome.UPDATED:
            typer.echo(_FIELD_DONE[fld])
        elif outcome is FieldOutcome.FAILED:
            typer.echo(report.errors[fld].message, err=True)
    if report.failed:
        raise typer.Exit(code=1)

@guarded
def list_(ctx: typer.Context):
    """Вывести все заметки с их содержанием."""
    notes = open_service(ctx).list()
    show(presenter().render(notes, show_text=True, show_total=True))

@guarded
def remove(ctx: typer.Context, note_id: str | None = typer.Argument(None, help="Номер заметки.")):
    """Удалить заметку."""
    open_service(ctx).remove(note_id)
    typer.echo(messages.DELETED)

# ---- Команды и короткие псевдонимы ----
for name, alias, fn in (
    ("get", "g", get),
    ("add", "a", add),
    ("update", "u", update),
    ("list", "l", list_),
    ("remove", "r", remove),
):
    app.command(name)(fn)
    app.command(alias, hidden=True)(fn)
