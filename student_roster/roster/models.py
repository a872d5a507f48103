# roster/models.py
"""Модуль, определяющий модель данных Student и правила проверки её полей."""
import math
from typing import List, Optional

try:
    # Сначала относительный (для pytest)
    from .config import MIN_MARKS, MAX_MARKS
    from .errors import ValidationError
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    from config import MIN_MARKS, MAX_MARKS
    from errors import ValidationError
# -------------------------

def check_name(name) -> Optional[str]:
    """Возвращает текст ошибки для имени или None, если имя корректно."""
    if not isinstance(name, str) or not name.strip():
        return "Имя студента не может быть пустым."
    # Формат файла - одно поле на строку, перевод строки в имени его ломает
    if '\n' in name or '\r' in name:
        return "Имя студента не может содержать перевод строки."
    return None

def check_roll_no(roll_no) -> Optional[str]:
    """Возвращает текст ошибки для номера или None."""
    if isinstance(roll_no, bool) or not isinstance(roll_no, int):
        return f"Номер '{roll_no}' должен быть целым числом."
    if roll_no < 0:
        return "Номер студента не может быть отрицательным."
    return None

def check_marks(marks) -> Optional[str]:
    """Возвращает текст ошибки для балла или None."""
    if isinstance(marks, bool) or not isinstance(marks, (int, float)):
        return f"Балл '{marks}' должен быть числом."
    # isnan только для float: огромный int не переводится во float
    if (isinstance(marks, float) and math.isnan(marks)) or marks < MIN_MARKS or marks > MAX_MARKS:
        return f"Балл {marks} недопустим. Разрешен диапазон {MIN_MARKS:g}-{MAX_MARKS:g}."
    return None

def validate_student_fields(name, roll_no, marks) -> List[str]:
    """Проверяет все поля сразу. Пустой список означает, что запись корректна."""
    problems = [check_name(name), check_roll_no(roll_no), check_marks(marks)]
    return [p for p in problems if p is not None]


class Student:
    """Представляет студента с его именем, номером и баллом."""
    def __init__(self, name: str, roll_no: int, marks: float):
        problems = validate_student_fields(name, roll_no, marks)
        if problems:
            raise ValidationError(" ".join(problems))

        self.name = name
        self._roll_no = roll_no
        self.marks = float(marks)

    @property
    def roll_no(self) -> int:
        """Номер студента. После создания записи не меняется."""
        return self._roll_no

    def __eq__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (self.name, self.roll_no, self.marks) == (other.name, other.roll_no, other.marks)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(name='{self.name}', roll_no={self.roll_no}, marks={self.marks!r})"

    def __str__(self) -> str:
        """Возвращает строку таблицы для вывода пользователю."""
        return f"{self.name:<20}{self.roll_no:<10}{self.marks:<10.2f}"
