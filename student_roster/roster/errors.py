# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class RosterError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class ValidationError(RosterError):
    """Некорректное значение поля при добавлении или обновлении записи."""
    pass

class DuplicateRollNoError(ValidationError):
    """Исключение при попытке добавить студента с уже существующим номером."""
    pass

class NotFoundError(RosterError):
    """Исключение, когда студент с заданным номером не найден."""
    pass

class CorruptDataError(RosterError):
    """Файл данных повреждён или имеет неверный формат."""
    pass

class FileProcessingError(RosterError):
    """Исключение, связанное с ошибками файловых операций."""
    pass
