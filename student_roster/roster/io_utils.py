# roster/io_utils.py
"""Модуль для чтения и записи файла данных.

Формат файла: текст, по три строки на студента, без заголовка.

    <имя>
    <номер>
    <балл>
"""
import logging
import os
from typing import List, NamedTuple, Optional, Sequence

try:
    # Сначала относительный (для pytest)
    from .config import ENCODING
    from .models import Student
    from .errors import RosterError, ValidationError, CorruptDataError, FileProcessingError
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    from config import ENCODING
    from models import Student
    from errors import RosterError, ValidationError, CorruptDataError, FileProcessingError
# -------------------------

LINES_PER_RECORD = 3


class LoadResult(NamedTuple):
    """Итог загрузки: список студентов и ошибка, если файл прочитать не удалось."""
    students: List[Student]
    error: Optional[RosterError] = None


def encode_student(student: Student) -> str:
    """Переводит студента в три строки формата файла."""
    # repr даёт кратчайшую запись float, которая читается обратно без потерь
    return f"{student.name}\n{student.roll_no}\n{student.marks!r}\n"

def decode_student(lines: Sequence[str], line_num: int = 1) -> Student:
    """Собирает студента из трёх строк (без символов перевода строки)."""
    if len(lines) != LINES_PER_RECORD:
        raise CorruptDataError(f"Неполная запись в строке {line_num}: {list(lines)}")

    name, roll_raw, marks_raw = lines
    try:
        roll_no = int(roll_raw.strip())
    except ValueError:
        raise CorruptDataError(f"Ошибка в строке {line_num + 1}: номер '{roll_raw}' не является целым числом.")
    try:
        marks = float(marks_raw.strip())
    except ValueError:
        raise CorruptDataError(f"Ошибка в строке {line_num + 2}: балл '{marks_raw}' не является числом.")

    try:
        return Student(name, roll_no, marks)
    except ValidationError as e:
        raise CorruptDataError(f"Ошибка в записи со строки {line_num}: {e}")

def parse_students(text: str) -> List[Student]:
    """Разбирает содержимое файла целиком. При любой ошибке выбрасывает CorruptDataError."""
    lines = text.split('\n')
    # Хвостовые пустые строки не могут быть данными: имя не бывает пустым
    while lines and not lines[-1].strip():
        lines.pop()

    students: List[Student] = []
    seen = set()
    for i in range(0, len(lines), LINES_PER_RECORD):
        student = decode_student(lines[i:i + LINES_PER_RECORD], line_num=i + 1)
        if student.roll_no in seen:
            raise CorruptDataError(f"Номер {student.roll_no} встречается в файле повторно (строка {i + 2}).")
        seen.add(student.roll_no)
        students.append(student)
    return students

def load_students(filepath: str) -> LoadResult:
    """Загружает студентов из файла.

    Отсутствие файла ошибкой не считается: возвращается пустой список.
    Если файл повреждён, всё прочитанное отбрасывается, а ошибка
    возвращается в LoadResult.error, чтобы вызывающий продолжил с пустым списком.
    """
    if not os.path.exists(filepath):
        logging.info(f"Файл {filepath} не найден, список пуст.")
        return LoadResult([])

    try:
        # Текстовый режим сам приводит \r\n к \n
        with open(filepath, mode='r', encoding=ENCODING) as file:
            text = file.read()
    except UnicodeDecodeError as e:
        logging.error(f"Файл {filepath} не в кодировке {ENCODING}: {e}")
        return LoadResult([], CorruptDataError(f"Файл {filepath} повреждён: {e}"))
    except IOError as e:
        logging.error(f"Не удалось открыть {filepath}: {e}")
        return LoadResult([], FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}"))

    try:
        students = parse_students(text)
    except CorruptDataError as e:
        logging.warning(f"Файл {filepath} повреждён: {e}")
        return LoadResult([], e)

    logging.info(f"Из {filepath} загружено записей: {len(students)}")
    return LoadResult(students)

def save_students(filepath: str, students: List[Student]):
    """Перезаписывает файл всеми студентами в порядке списка."""
    text = "".join(encode_student(s) for s in students)
    # Кодируем до открытия файла, иначе старые данные будут обнулены впустую
    try:
        text.encode(ENCODING)
    except UnicodeError as e:
        logging.error(f"Не удалось закодировать данные для {filepath}: {e}")
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: данные не кодируются в {ENCODING} ({e})")

    try:
        with open(filepath, mode='w', encoding=ENCODING, newline='\n') as file:
            file.write(text)
    except (IOError, UnicodeError) as e:
        logging.error(f"Ошибка записи в {filepath}: {e}")
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: {e}")

    logging.info(f"В {filepath} сохранено записей: {len(students)}")
