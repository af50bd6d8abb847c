
APP_HELP = "Консольное приложение для заметок на SQLAlchemy."

# ---- Подсказки ввода ----
ASK_TITLE = "Введите название заметки:"
ASK_BODY = "Введите текст заметки:"
ASK_NEW_TITLE = "Введите новое название заметки (нажмите Enter, чтобы пропустить):"
ASK_NEW_BODY = "Введите новый текст заметки (нажмите Enter, чтобы пропустить):"

# ---- Успех ----
CREATED = "Заметка создана!"
TITLE_UPDATED = "Название обновлено!"
BODY_UPDATED = "Текст обновлен!"
DELETED = "Заметка удалена."

# ---- Ошибки ----
BAD_ID = "Введен некорректный идентификатор заметки."
EMPTY_TITLE = "Название заметки не может быть пустым."
NOT_FOUND = "Заметка с таким идентификатором не найдена!"
DB_CONNECT_FAILED = "Не удалось подключиться к базе данных."
SCHEMA_FAILED = "Не удалось создать схему базы данных."
CONFIG_INVALID = "Некорректные настройки:"
CREATE_FAILED = "Не получилось создать заметку."
LIST_FAILED = "Не получилось получить список заметок."
GET_FAILED = "Не удалось получить заметку: запрос выполнен с ошибкой."
READ_FAILED = "Не получилось получить заметку."
CHECK_FAILED = "Не удалось найти заметку: не смог выполнить запрос."
TITLE_UPDATE_FAILED = "Не удалось обновить заголовок заметки."
BODY_UPDATE_FAILED = "Не удалось обновить текст заметки."
DELETE_FAILED = "Не удалось удалить заметку!"

# ---- Вывод заметок ----
LABEL_ID = "Номер заметки: "
LABEL_TITLE = "Название: "
LABEL_CREATED = "Дата создания: "
LABEL_UPDATED = "Дата последнего изменения: "
LABEL_TEXT = "Текст заметки:"
LABEL_TOTAL = "Всего заметок: "
