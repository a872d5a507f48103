# roster/config.py
"""Настройки приложения. Любое значение можно переопределить переменной окружения."""
import os

# --- КОНФИГУРАЦИЯ ---
DATA_FILE = os.getenv('ROSTER_DATA_FILE', 'students.dat')
ENCODING = 'utf-8'

LOG_LEVEL = os.getenv('ROSTER_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

# Допустимый диапазон баллов (включительно)
MIN_MARKS = 0.0
MAX_MARKS = 100.0
