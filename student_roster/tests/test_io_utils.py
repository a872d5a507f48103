# tests/test_io_utils.py
import pytest
from roster.models import Student
from roster.errors import CorruptDataError, FileProcessingError
from roster.io_utils import (
    encode_student, decode_student, parse_students, load_students, save_students,
)

def test_file_roundtrip(sample_students, tmp_path):
    """Тестирует полный цикл: запись в файл и чтение обратно."""
    filepath = tmp_path / "students.dat"

    save_students(filepath, sample_students)
    result = load_students(filepath)

    assert result.error is None
    # Порядок записей должен сохраниться
    assert result.students == sample_students

def test_roundtrip_keeps_exact_marks(tmp_path):
    filepath = tmp_path / "students.dat"
    students = [Student("Alice", 1, 88.5), Student("Bob", 2, 42.0), Student("Третья", 3, 100 / 3)]

    save_students(filepath, students)

    assert filepath.read_text(encoding="utf-8").startswith("Alice\n1\n88.5\nBob\n2\n42.0\n")
    assert load_students(filepath).students == students

def test_roundtrip_empty_store(tmp_path):
    filepath = tmp_path / "students.dat"
    save_students(filepath, [])
    assert filepath.read_text(encoding="utf-8") == ""
    assert load_students(filepath) == ([], None)

def test_missing_file_is_not_an_error(tmp_path):
    result = load_students(tmp_path / "nope.dat")
    assert result.students == []
    assert result.error is None

def test_encode_student():
    assert encode_student(Student("Анна", 5, 97.5)) == "Анна\n5\n97.5\n"

def test_decode_student_tolerates_spaces_around_numbers():
    assert decode_student(["  Анна ", " 5 ", "97.5  "]) == Student("  Анна ", 5, 97.5)

@pytest.mark.parametrize("lines", [
    ["Анна", "пять", "97.5"],
    ["Анна", "5", "много"],
    ["Анна", "5.5", "97.5"],
    ["Анна", "-1", "50"],
    ["Анна", "5", "101"],
    ["", "5", "50"],
    ["Анна", "5"],
])
def test_decode_student_rejects_bad_lines(lines):
    with pytest.raises(CorruptDataError):
        decode_student(lines)

def test_parse_accepts_missing_final_newline_and_trailing_blank_lines():
    assert parse_students("A\n1\n50\nB\n2\n60") == [Student("A", 1, 50.0), Student("B", 2, 60.0)]
    assert parse_students("A\n1\n50\n\n\n") == [Student("A", 1, 50.0)]
    assert parse_students("") == []

def test_load_accepts_windows_newlines(tmp_path):
    filepath = tmp_path / "students.dat"
    filepath.write_bytes("Анна\r\n5\r\n97.5\r\n".encode("utf-8"))
    assert load_students(filepath).students == [Student("Анна", 5, 97.5)]

def test_parse_rejects_duplicate_roll_no():
    with pytest.raises(CorruptDataError):
        parse_students("A\n1\n50\nB\n1\n60\n")

def test_truncated_file_gives_empty_store(tmp_path):
    filepath = tmp_path / "students.dat"
    # Висящая строка с именем без номера и балла
    filepath.write_text("Alice\n1\n88.5\nBob\n", encoding="utf-8")

    result = load_students(filepath)

    assert result.students == []
    assert isinstance(result.error, CorruptDataError)

def test_corrupt_middle_record_discards_everything(tmp_path):
    filepath = tmp_path / "students.dat"
    filepath.write_text("Alice\n1\n88.5\nBob\nдва\n42\nCarol\n3\n70\n", encoding="utf-8")

    result = load_students(filepath)

    assert result.students == []
    assert "два" in str(result.error)

def test_undecodable_file_is_reported(tmp_path):
    filepath = tmp_path / "students.dat"
    filepath.write_bytes(b"\xff\xfe\x00garbage\n1\n50\n")

    result = load_students(filepath)

    assert result.students == []
    assert isinstance(result.error, CorruptDataError)

def test_save_to_missing_directory_fails(tmp_path, sample_students):
    with pytest.raises(FileProcessingError):
        save_students(tmp_path / "no_such_dir" / "students.dat", sample_students)

def test_save_unencodable_name_keeps_old_file(tmp_path):
    filepath = tmp_path / "students.dat"
    filepath.write_text("Alice\n1\n88.5\n", encoding="utf-8")
    # Одиночный суррогат приходит из input() при локали C/POSIX
    students = [Student("Bob\udcff", 2, 50.0)]

    with pytest.raises(FileProcessingError):
        save_students(filepath, students)

    assert filepath.read_text(encoding="utf-8") == "Alice\n1\n88.5\n"
