# timetable.py
import json
import logging
import os
import uuid
from typing import List, Dict, Optional, Iterable, Any

import config
from data_models import (Subject, ScheduleEntry, DAYS, TIME_SLOTS, all_cells,
                         subject_color)
from greedy_scheduler import generate_schedule

logger = logging.getLogger(__name__)


class TimeTable:
    """Subjects entered so far and the last generated schedule.

    State is kept in a JSON key-value store under `config.STORAGE_KEY` and is
    reloaded on construction.
    """

    def __init__(self, store_file: Optional[str] = None, storage_key: str = config.STORAGE_KEY):
        self.store_file = store_file or config.STORE_FILE
        self.storage_key = storage_key
        self.subjects: List[Subject] = []
        self.schedule: List[ScheduleEntry] = []

        self.load_data_from_file()

    def _read_store(self) -> Dict[str, Any]:
        if not os.path.exists(self.store_file):
            return {}
        try:
            with open(self.store_file, 'r', encoding='utf-8') as f:
                store = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read store '%s': %s", self.store_file, e)
            return {}
        if not isinstance(store, dict):
            logger.warning("Store '%s' is not a key-value object, ignoring it", self.store_file)
            return {}
        return store

    def _write_store(self, store: Dict[str, Any]):
        directory = os.path.dirname(os.path.abspath(self.store_file))
        os.makedirs(directory, exist_ok=True)
        with open(self.store_file, 'w', encoding='utf-8') as f:
            json.dump(store, f, indent=4)

    def load_data_from_file(self):
        self.subjects = []
        self.schedule = []

        data = self._read_store().get(self.storage_key)
        if data is None:
            return

        try:
            subjects = [Subject.from_dict(s) for s in data.get('subjects') or []]
            schedule = [ScheduleEntry.from_dict(e) for e in data.get('schedule') or []]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Failed to load saved timetable: %s", e)
            return

        if schedule and [e.cell for e in schedule] != all_cells():
            logger.warning("Saved schedule does not cover the weekly grid, discarding it")
            schedule = []

        self.subjects = subjects
        self.schedule = schedule
        logger.info("Loaded %d subjects from '%s'", len(self.subjects), self.store_file)

    def save_data_to_file(self):
        store = self._read_store()
        if not self.subjects and not self.schedule:
            # nothing left to keep, drop the saved record as well
            if store.pop(self.storage_key, None) is not None:
                self._write_store(store)
            return
        store[self.storage_key] = {
            'subjects': [s.to_dict() for s in self.subjects],
            'schedule': [e.to_dict() for e in self.schedule],
        }
        self._write_store(store)

    def add_subject(self, name: str, professor: str, hours_per_week: int,
                    preferred_days: Optional[Iterable[str]] = None,
                    preferred_time_slots: Optional[Iterable[str]] = None) -> Subject:
        name = (name or "").strip()
        professor = (professor or "").strip()
        preferred_days = tuple(preferred_days or ())
        preferred_time_slots = tuple(preferred_time_slots or ())

        if not name:
            raise ValueError("Subject name is required")
        if not professor:
            raise ValueError("Professor name is required")
        if isinstance(hours_per_week, bool) or not isinstance(hours_per_week, int):
            raise ValueError(f"Hours per week must be a whole number, got {hours_per_week!r}")
        if hours_per_week < config.MIN_HOURS_PER_WEEK:
            raise ValueError(f"Minimum {config.MIN_HOURS_PER_WEEK} hour required")
        if hours_per_week > config.MAX_HOURS_PER_WEEK:
            raise ValueError(f"Maximum {config.MAX_HOURS_PER_WEEK} hours allowed")

        unknown_days = [d for d in preferred_days if d not in DAYS]
        if unknown_days:
            raise ValueError(f"Unknown days: {unknown_days}")
        unknown_slots = [t for t in preferred_time_slots if t not in TIME_SLOTS]
        if unknown_slots:
            raise ValueError(f"Unknown time slots: {unknown_slots}")

        subject = Subject(
            id=uuid.uuid4().hex,
            name=name,
            professor=professor,
            hours_per_week=hours_per_week,
            preferred_days=preferred_days,
            preferred_time_slots=preferred_time_slots,
            color=subject_color(len(self.subjects)),
        )
        self.subjects.append(subject)
        self.save_data_to_file()
        logger.info("Added %s (%s), %d hours/week", name, professor, hours_per_week)
        return subject

    def remove_subject(self, subject_id: str) -> bool:
        remaining = [s for s in self.subjects if s.id != subject_id]
        removed = len(remaining) != len(self.subjects)
        self.subjects = remaining
        if removed:
            self.schedule = [ScheduleEntry(e.day, e.time)
                             if e.is_occupied and e.subject.id == subject_id else e
                             for e in self.schedule]
            self.save_data_to_file()
            logger.info("Removed subject %s", subject_id)
        return removed

    def generate(self) -> List[ScheduleEntry]:
        if not self.subjects:
            raise ValueError("Please add at least one subject")
        self.schedule = generate_schedule(self.subjects)
        self.save_data_to_file()
        return self.schedule

    def clear(self):
        self.subjects = []
        self.schedule = []
        self.save_data_to_file()

    def statistics(self) -> Dict[str, int]:
        return {
            'total_subjects': len(self.subjects),
            'total_hours': sum(s.hours_per_week for s in self.subjects),
            'unique_professors': len({s.professor for s in self.subjects}),
        }
