
class NotesError(Exception):
    exit_code = 1

    def __init__(self, message, exit_code=None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code

class UsageError(NotesError):
    exit_code = 2

class ValidationError(UsageError):
    pass

class NotFound(NotesError):
    pass

class StoreError(NotesError):
    pass

# схема не создалась или база недоступна: до выполнения команды не доходим
class FatalSchemaError(StoreError):
    pass

# неверные настройки в окружении или .env
class ConfigError(NotesError):
    pass
