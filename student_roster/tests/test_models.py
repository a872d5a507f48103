# tests/test_models.py
import pytest
from roster.models import Student, validate_student_fields
from roster.errors import ValidationError

def test_student_creation():
    s = Student("Тестов Тест", 7, 88.5)
    assert s.name == "Тестов Тест"
    assert s.roll_no == 7
    assert s.marks == 88.5

def test_integer_marks_stored_as_float():
    s = Student("Целый балл", 0, 100)
    assert isinstance(s.marks, float)
    assert s.marks == 100.0

@pytest.mark.parametrize("marks", [0, 100, 0.0, 100.0, 55.5])
def test_marks_boundaries_accepted(marks):
    assert Student("Граница", 1, marks).marks == marks

@pytest.mark.parametrize("marks", [-0.01, 100.01, 10**400, -10**400, float("nan"), "50", True])
def test_bad_marks_rejected(marks):
    with pytest.raises(ValidationError):
        Student("Граница", 1, marks)

@pytest.mark.parametrize("name", ["", "   ", "Две\nстроки", None])
def test_bad_name_rejected(name):
    with pytest.raises(ValidationError):
        Student(name, 1, 50.0)

@pytest.mark.parametrize("roll_no", [-1, 1.5, "3", False])
def test_bad_roll_no_rejected(roll_no):
    with pytest.raises(ValidationError):
        Student("Номер", roll_no, 50.0)

def test_validate_collects_all_problems():
    assert validate_student_fields("Анна", 1, 10.0) == []
    assert len(validate_student_fields("", -5, 200)) == 3

def test_roll_no_is_read_only():
    s = Student("Неизменный", 4, 60.0)
    with pytest.raises(AttributeError):
        s.roll_no = 5

def test_student_equality():
    assert Student("А", 1, 50.0) == Student("А", 1, 50)
    assert Student("А", 1, 50.0) != Student("А", 2, 50.0)

def test_student_str_representation(capsys):
    s = Student("Анна Котова", 5, 97.5)
    print(s)
    captured = capsys.readouterr()
    assert "Анна Котова" in captured.out
    assert "5" in captured.out
    assert "97.50" in captured.out
