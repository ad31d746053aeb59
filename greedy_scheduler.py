# greedy_scheduler.py

import logging
from typing import List, Dict, Set

from config import SAFETY_FACTOR
from data_models import Subject, ScheduleEntry, Cell, empty_schedule

logger = logging.getLogger(__name__)


class GreedyScheduler:
    """Single-pass greedy allocation of subjects to the weekly grid.

    Subjects with the most day/time preferences are placed first. Each subject
    takes cells round-robin across the days that still have candidates for it,
    so its sessions spread over the week instead of piling up on one day.
    Nothing is ever reassigned once placed.
    """

    def __init__(self, subjects: List[Subject], safety_factor: int = SAFETY_FACTOR):
        self.subjects = list(subjects)
        self.safety_factor = safety_factor
        # subject id -> number of cells it received in the last run
        self.assigned_hours: Dict[str, int] = {}

    def run(self) -> List[ScheduleEntry]:
        schedule = empty_schedule()
        position = {entry.cell: idx for idx, entry in enumerate(schedule)}
        professor_cells: Dict[str, Set[Cell]] = {}
        self.assigned_hours = {}

        for subject in self.sort_by_constraints(self.subjects):
            candidates = self.find_candidates(subject, schedule, professor_cells)
            chosen = self.distribute(subject, candidates)

            for cell in chosen:
                day, time = cell
                schedule[position[cell]] = ScheduleEntry(day, time, subject)
                professor_cells.setdefault(subject.professor, set()).add(cell)

            self.assigned_hours[subject.id] = len(chosen)
            if len(chosen) < subject.hours_per_week:
                logger.info("%s (%s) placed for %d of %d hours",
                            subject.name, subject.professor,
                            len(chosen), subject.hours_per_week)

        logger.debug("Scheduled %d subjects into %d occupied cells",
                     len(self.subjects), sum(1 for e in schedule if e.is_occupied))
        return schedule

    @staticmethod
    def sort_by_constraints(subjects: List[Subject]) -> List[Subject]:
        # sorted() is stable, equal weights keep their input order
        return sorted(subjects, key=lambda s: -s.constraint_weight)

    def find_candidates(self, subject: Subject, schedule: List[ScheduleEntry],
                        professor_cells: Dict[str, Set[Cell]]) -> List[Cell]:
        busy = professor_cells.get(subject.professor, set())
        candidates = []
        for entry in schedule:
            if entry.is_occupied:
                continue
            if subject.preferred_days and entry.day not in subject.preferred_days:
                continue
            if subject.preferred_time_slots and entry.time not in subject.preferred_time_slots:
                continue
            if entry.cell in busy:
                continue
            candidates.append(entry.cell)
        return candidates

    def distribute(self, subject: Subject, candidates: List[Cell]) -> List[Cell]:
        """Pick up to `hours_per_week` candidates, one day at a time in turn."""
        cells_by_day: Dict[str, List[Cell]] = {}
        for cell in candidates:
            cells_by_day.setdefault(cell[0], []).append(cell)

        days = list(cells_by_day)
        remaining = len(candidates)
        chosen: List[Cell] = []
        day_index = 0

        while len(chosen) < subject.hours_per_week and remaining > 0:
            day_cells = cells_by_day[days[day_index % len(days)]]
            if day_cells:
                chosen.append(day_cells.pop(0))
                remaining -= 1

            day_index += 1
            if day_index > len(days) * self.safety_factor:
                logger.warning("Stopped distributing %s after %d cycles",
                               subject.name, day_index)
                break

        return chosen


def generate_schedule(subjects: List[Subject]) -> List[ScheduleEntry]:
    return GreedyScheduler(subjects).run()
