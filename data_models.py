# data_models.py
from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Optional, NamedTuple, Any

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

TIME_SLOTS = [
    "9:00 AM - 10:00 AM",
    "10:00 AM - 11:00 AM",
    "11:00 AM - 12:00 PM",
    "12:00 PM - 1:00 PM",
    "1:00 PM - 2:00 PM",
    "2:00 PM - 3:00 PM",
    "3:00 PM - 4:00 PM",
    "4:00 PM - 5:00 PM",
]

SUBJECT_COLORS = [
    "#3B82F6",  # Blue
    "#10B981",  # Green
    "#F59E0B",  # Amber
    "#EF4444",  # Red
    "#8B5CF6",  # Purple
    "#EC4899",  # Pink
    "#06B6D4",  # Cyan
    "#F97316",  # Orange
    "#14B8A6",  # Teal
    "#6366F1",  # Indigo
]

# (day, time slot label)
Cell = Tuple[str, str]


def subject_color(index: int) -> str:
    """Color for the subject at position `index` of the subject list."""
    return SUBJECT_COLORS[index % len(SUBJECT_COLORS)]


def _labels(value) -> Tuple[str, ...]:
    """Preference list from stored data; a single label is accepted as-is."""
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Expected a list of labels, got {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class Subject:
    id: str
    name: str
    professor: str
    hours_per_week: int
    preferred_days: Tuple[str, ...] = ()        # empty = any day
    preferred_time_slots: Tuple[str, ...] = ()  # empty = any time
    color: str = SUBJECT_COLORS[0]

    @property
    def constraint_weight(self) -> int:
        return len(self.preferred_days) + len(self.preferred_time_slots)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'professor': self.professor,
            'hoursPerWeek': self.hours_per_week,
            'preferredDays': list(self.preferred_days),
            'preferredTimeSlots': list(self.preferred_time_slots),
            'color': self.color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Subject':
        return cls(
            id=str(data['id']),
            name=data['name'],
            professor=data['professor'],
            hours_per_week=int(data['hoursPerWeek']),
            preferred_days=_labels(data.get('preferredDays')),
            preferred_time_slots=_labels(data.get('preferredTimeSlots')),
            color=data.get('color') or SUBJECT_COLORS[0],
        )


@dataclass(frozen=True)
class ScheduleEntry:
    day: str
    time: str
    subject: Optional[Subject] = None

    @property
    def cell(self) -> Cell:
        return (self.day, self.time)

    @property
    def is_occupied(self) -> bool:
        return self.subject is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'day': self.day,
            'time': self.time,
            'subject': self.subject.to_dict() if self.subject else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScheduleEntry':
        subject = data.get('subject')
        return cls(
            day=data['day'],
            time=data['time'],
            subject=Subject.from_dict(subject) if subject else None,
        )


class ValidationResult(NamedTuple):
    is_valid: bool
    errors: List[str]


@dataclass
class SubjectFulfillment:
    subject: Subject
    assigned_hours: int

    @property
    def missing_hours(self) -> int:
        return max(0, self.subject.hours_per_week - self.assigned_hours)


@dataclass
class ScheduleSummary:
    required_hours: int
    scheduled_hours: int
    fulfillment: float
    clashes: int
    subjects: List[SubjectFulfillment] = field(default_factory=list)

    @property
    def unfulfilled(self) -> List[SubjectFulfillment]:
        return [s for s in self.subjects if s.missing_hours > 0]


def all_cells() -> List[Cell]:
    return [(day, time) for day in DAYS for time in TIME_SLOTS]


def empty_schedule() -> List[ScheduleEntry]:
    """Every cell of the week, unoccupied, days outer and times inner."""
    return [ScheduleEntry(day, time) for day, time in all_cells()]
