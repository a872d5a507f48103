# roster/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для работы со списком студентов."""
import sys
import os
import logging
import traceback
from typing import List, Optional

if getattr(sys, 'frozen', False):
    base_path = sys._MEIPASS
else:
    base_path = os.path.dirname(os.path.abspath(__file__))

if base_path not in sys.path:
    sys.path.append(base_path)

try:
    # 1. Попытка относительного импорта (Для pytest и запуска через python -m roster.main)
    from . import config, io_utils, processing, errors
    from .models import Student
except (ImportError, ValueError):
    # 2. Попытка прямого импорта (Для EXE и запуска через python roster/main.py)
    import config
    import io_utils
    import processing
    import errors
    from models import Student
# -------------------------

def setup_logging():
    """Настраивает журнал. Сообщения идут в stderr и не мешают меню."""
    level = logging.getLevelName(config.LOG_LEVEL)
    if not isinstance(level, int):
        # Неизвестное имя уровня не должно мешать запуску
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      МЕНЮ УПРАВЛЕНИЯ")
    print("="*30)
    print("1. Добавить студента")
    print("2. Показать всех студентов")
    print("3. Найти студента по номеру")
    print("4. Изменить данные студента")
    print("5. Удалить студента")
    print("6. Показать статистику")
    print("7. Найти студентов по имени")
    print("8. Сортировать и показать список")
    print("0. Сохранить и выйти")
    print("="*30)

def print_table(students: List[Student]):
    """Печатает студентов таблицей с заголовком."""
    print(f"\n{'Имя':<20}{'Номер':<10}{'Балл':<10}")
    print("-"*40)
    for s in students:
        print(s)

def read_int(prompt: str) -> int:
    """Запрашивает целое число, при ошибке выбрасывает ValueError."""
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"'{raw}' не является целым числом.")

def read_float(prompt: str) -> float:
    """Запрашивает число с плавающей точкой."""
    raw = input(prompt).strip()
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"'{raw}' не является числом.")

def load_data(filepath: str) -> List[Student]:
    """Загружает список при старте. Повреждённый файл даёт пустой список и предупреждение."""
    if not os.path.exists(filepath):
        print(f"ℹ️ Файл {filepath} не найден. Начинаем с пустого списка.")
        return []

    result = io_utils.load_students(filepath)
    if result.error is not None:
        print(f"⚠️ {result.error} Начинаем с пустого списка.")
        return []

    print(f"✅ Загружено записей: {len(result.students)}.")
    return result.students

def save_data(filepath: str, students: List[Student]) -> bool:
    """Сохраняет список при выходе. Ошибка выводится, но работу не прерывает."""
    try:
        io_utils.save_students(filepath, students)
    except errors.FileProcessingError as e:
        print(f"❌ Данные не сохранены: {e}")
        return False
    print(f"✅ Данные сохранены в {filepath}. Записей: {len(students)}.")
    return True

def main_cli(data_file: Optional[str] = None):
    """Основной цикл консольного приложения."""
    filepath = data_file or config.DATA_FILE
    students = load_data(filepath)

    while True:
        print_menu()
        try:
            choice = input("Выберите пункт меню: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nВвод завершён.")
            break

        try:
            if choice == '1':
                name = input("Введите имя студента: ")
                roll_no = read_int("Введите номер студента: ")
                marks = read_float("Введите балл (0-100): ")
                student = processing.add_student(students, name, roll_no, marks)
                print(f"✅ Студент {student.name} успешно добавлен.")

            elif choice == '2':
                if not students:
                    print("ℹ️ Список студентов пуст.")
                else:
                    print_table(students)

            elif choice == '3':
                roll_no = read_int("Введите номер для поиска: ")
                student = processing.get_student(students, roll_no)
                print("\n--- Студент найден ---")
                print_table([student])

            elif choice == '4':
                roll_no = read_int("Введите номер студента для изменения: ")
                # Номер проверяем до ввода новых данных
                processing.get_student(students, roll_no)
                name = input("Введите новое имя: ")
                marks = read_float("Введите новый балл (0-100): ")
                processing.update_student(students, roll_no, name, marks)
                print("✅ Данные студента обновлены.")

            elif choice == '5':
                roll_no = read_int("Введите номер студента для удаления: ")
                student = processing.remove_student(students, roll_no)
                print(f"✅ Студент {student.name} удален.")

            elif choice == '6':
                stats = processing.get_statistics(students)
                if not stats:
                    print("ℹ️ Список студентов пуст, статистика недоступна.")
                else:
                    print("\n--- Статистика ---")
                    print(f"Всего студентов: {stats['total_students']}")
                    print(f"Средний балл: {stats['average']:.2f}")
                    print(f"Наивысший балл: {stats['highest']:.2f}")
                    print(f"Наименьший балл: {stats['lowest']:.2f}")

            elif choice == '7':
                fragment = input("Введите часть имени: ")
                found = processing.search_by_name(students, fragment)
                if not found:
                    print("ℹ️ Никого не найдено.")
                else:
                    print_table(found)

            elif choice == '8':
                sort_key = input(f"Введите ключ сортировки ({', '.join(processing.SORT_KEYS)}): ").strip().lower()
                sorted_list = processing.sort_students(students, sort_key)
                print(f"\n--- Студенты, отсортированные по '{sort_key}' ---")
                print_table(sorted_list)

            elif choice == '0':
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 8.")

        except ValueError as e:
            print(f"❌ Ошибка ввода: {e}")
        except errors.RosterError as e:
            print(f"❌ Ошибка: {e}")
        except (EOFError, KeyboardInterrupt):
            print("\nОперация прервана.")
            break

    save_data(filepath, students)
    print("👋 До свидания!")

def run():
    """Точка входа для консольной команды и EXE. Путь к файлу можно передать аргументом."""
    setup_logging()
    try:
        main_cli(sys.argv[1] if len(sys.argv) > 1 else None)
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
    finally:
        if getattr(sys, 'frozen', False):
            input("\nНажмите Enter, чтобы выйти...")

if __name__ == '__main__':
    run()
