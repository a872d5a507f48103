# roster/processing.py
"""Модуль для управления списком студентов: добавление, поиск, изменение, статистика."""
from typing import List, Dict, Any, Optional

try:
    # 1. Относительный импорт (для pytest)
    from .models import Student, check_name, check_marks
    from .errors import ValidationError, NotFoundError, DuplicateRollNoError
except (ImportError, ValueError):
    # 2. Прямой импорт (для EXE)
    from models import Student, check_name, check_marks
    from errors import ValidationError, NotFoundError, DuplicateRollNoError
# --------------------------------------------------

SORT_KEYS = ('roll', 'name', 'marks')

def find_student(students: List[Student], roll_no: int) -> Optional[Student]:
    """Ищет студента по номеру. Возвращает None, если такого нет."""
    return next((s for s in students if s.roll_no == roll_no), None)

def get_student(students: List[Student], roll_no: int) -> Student:
    """То же, что find_student, но без студента выбрасывает NotFoundError."""
    student = find_student(students, roll_no)
    if student is None:
        raise NotFoundError(f"Студент с номером {roll_no} не найден.")
    return student

def add_student(students: List[Student], name: str, roll_no: int, marks: float) -> Student:
    """Добавляет нового студента в конец списка, проверяя уникальность номера."""
    # Конструктор проверит поля раньше, чем список будет изменён
    new_student = Student(name, roll_no, marks)
    if find_student(students, roll_no) is not None:
        raise DuplicateRollNoError(f"Студент с номером {roll_no} уже существует.")

    students.append(new_student)
    return new_student

def update_student(students: List[Student], roll_no: int, new_name: str, new_marks: float) -> Student:
    """Меняет имя и балл существующего студента. Номер остаётся прежним."""
    student = get_student(students, roll_no)

    problems = [p for p in (check_name(new_name), check_marks(new_marks)) if p is not None]
    if problems:
        raise ValidationError(" ".join(problems))

    student.name = new_name
    student.marks = float(new_marks)
    return student

def remove_student(students: List[Student], roll_no: int) -> Student:
    """Удаляет студента из списка по номеру, сохраняя порядок остальных."""
    student = get_student(students, roll_no)
    students.remove(student)
    return student

def search_by_name(students: List[Student], fragment: str) -> List[Student]:
    """Ищет студентов, в имени которых встречается fragment (без учёта регистра)."""
    needle = fragment.strip().casefold()
    return [s for s in students if needle in s.name.casefold()]

def sort_students(students: List[Student], by: str) -> List[Student]:
    """Возвращает отсортированную копию списка. Сам список не меняется."""
    if by == 'roll':
        return sorted(students, key=lambda s: s.roll_no)
    elif by == 'name':
        return sorted(students, key=lambda s: (s.name.casefold(), s.roll_no))
    elif by == 'marks':
        # По убыванию балла, затем по номеру для стабильности
        return sorted(students, key=lambda s: (-s.marks, s.roll_no))
    else:
        raise ValueError(f"Неверный ключ для сортировки. Доступно: {', '.join(SORT_KEYS)}.")

def get_statistics(students: List[Student]) -> Optional[Dict[str, Any]]:
    """Считает количество, средний, максимальный и минимальный балл за один проход."""
    if not students:
        return None

    total = 0.0
    highest = lowest = students[0].marks
    for s in students:
        total += s.marks
        if s.marks > highest:
            highest = s.marks
        if s.marks < lowest:
            lowest = s.marks

    return {
        "total_students": len(students),
        "average": total / len(students),
        "highest": highest,
        "lowest": lowest,
    }
