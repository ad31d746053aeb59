import logging
from typing import List, Dict, Set

from data_models import (Subject, ScheduleEntry, Cell, ValidationResult,
                         ScheduleSummary, SubjectFulfillment)

logger = logging.getLogger(__name__)


def validate_schedule(schedule: List[ScheduleEntry]) -> ValidationResult:
    """Re-check a finished schedule for professors booked twice in one cell."""
    errors: List[str] = []
    professor_cells: Dict[str, Set[Cell]] = {}

    for entry in schedule:
        if not entry.is_occupied:
            continue
        professor = entry.subject.professor
        seen = professor_cells.setdefault(professor, set())
        if entry.cell in seen:
            errors.append(
                f"Professor {professor} has overlapping classes at {entry.day} {entry.time}")
        seen.add(entry.cell)

    return ValidationResult(is_valid=not errors, errors=errors)


def summarize_schedule(subjects: List[Subject],
                       schedule: List[ScheduleEntry]) -> ScheduleSummary:
    """Compare the hours each subject received against its weekly target."""
    assigned: Dict[str, int] = {}
    for entry in schedule:
        if entry.is_occupied:
            assigned[entry.subject.id] = assigned.get(entry.subject.id, 0) + 1

    rows = [SubjectFulfillment(subject, assigned.get(subject.id, 0)) for subject in subjects]
    required = sum(max(0, s.hours_per_week) for s in subjects)
    scheduled = sum(min(r.assigned_hours, max(0, r.subject.hours_per_week)) for r in rows)
    fulfillment = scheduled / required if required > 0 else 1.0
    clashes = len(validate_schedule(schedule).errors)

    summary = ScheduleSummary(
        required_hours=required,
        scheduled_hours=scheduled,
        fulfillment=fulfillment,
        clashes=clashes,
        subjects=rows,
    )
    logger.debug("Fulfillment %.2f%% (%d/%d hours), clashes: %d",
                 fulfillment * 100, scheduled, required, clashes)
    return summary


def print_summary(summary: ScheduleSummary):
    print(f"Fulfillment: {summary.fulfillment:.2%}, "
          f"Scheduled Hours: {summary.scheduled_hours}/{summary.required_hours}, "
          f"Clashes: {summary.clashes}")
    for row in summary.unfulfilled:
        print(f"  {row.subject.name} ({row.subject.professor}): "
              f"{row.assigned_hours}/{row.subject.hours_per_week} hours, "
              f"{row.missing_hours} could not be placed")
