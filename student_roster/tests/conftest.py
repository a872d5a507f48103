# tests/conftest.py
import pytest
from typing import List
from roster.models import Student

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("Иванов Иван", 3, 50.0),
        Student("Петров Петр", 1, 90.0),
        Student("Сидорова Анна", 2, 70.0),
    ]
