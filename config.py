"""Configuration settings for the timetable generator."""

import logging
import os
from typing import Optional

# Directory paths
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
OUTPUT_DIR = os.path.join(BASE_DIR, 'output_data')

# Key-value store holding saved timetables
STORE_FILE = os.path.join(BASE_DIR, 'timetable_store.json')
STORAGE_KEY = 'university_timetable'

# Subject form limits
MIN_HOURS_PER_WEEK = 1
MAX_HOURS_PER_WEEK = 10

# Round-robin cycles allowed per candidate day before the allocator gives up
SAFETY_FACTOR = 20

# Output file names
SCHEDULE_JSON = 'schedule_output.json'
SCHEDULE_HTML = 'schedule_output.html'
SCHEDULE_PDF = 'timetable.pdf'
SCHEDULE_XLSX = 'timetable.xlsx'

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
