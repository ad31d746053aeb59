import unittest

from data_models import (Subject, ScheduleEntry, DAYS, TIME_SLOTS, SUBJECT_COLORS,
                         empty_schedule, all_cells, subject_color)


class TestGridModel(unittest.TestCase):

    def test_empty_schedule_order(self):
        schedule = empty_schedule()
        self.assertEqual(len(schedule), 40)
        self.assertEqual(schedule[0].cell, ("Monday", "9:00 AM - 10:00 AM"))
        self.assertEqual(schedule[7].cell, ("Monday", "4:00 PM - 5:00 PM"))
        self.assertEqual(schedule[8].cell, ("Tuesday", "9:00 AM - 10:00 AM"))
        self.assertEqual(schedule[-1].cell, ("Friday", "4:00 PM - 5:00 PM"))
        self.assertFalse(any(e.is_occupied for e in schedule))

    def test_cells_are_unique(self):
        cells = all_cells()
        self.assertEqual(len(set(cells)), len(DAYS) * len(TIME_SLOTS))

    def test_subject_color_cycles(self):
        self.assertEqual(subject_color(0), SUBJECT_COLORS[0])
        self.assertEqual(subject_color(len(SUBJECT_COLORS) + 2), SUBJECT_COLORS[2])


class TestSubject(unittest.TestCase):

    def test_constraint_weight(self):
        self.assertEqual(Subject("1", "Art", "Dr. A", 2).constraint_weight, 0)
        subject = Subject("2", "Art", "Dr. A", 2,
                          preferred_days=("Monday", "Friday"),
                          preferred_time_slots=(TIME_SLOTS[0],))
        self.assertEqual(subject.constraint_weight, 3)

    def test_from_dict_missing_preferences(self):
        subject = Subject.from_dict({
            'id': 17,
            'name': 'Art',
            'professor': 'Dr. A',
            'hoursPerWeek': '3',
            'preferredDays': None,
            'color': '#10B981',
        })
        self.assertEqual(subject.id, '17')
        self.assertEqual(subject.hours_per_week, 3)
        self.assertEqual(subject.preferred_days, ())
        self.assertEqual(subject.preferred_time_slots, ())

    def test_from_dict_single_label(self):
        subject = Subject.from_dict({
            'id': 'a',
            'name': 'Art',
            'professor': 'Dr. A',
            'hoursPerWeek': 1,
            'preferredDays': 'Monday',
            'preferredTimeSlots': TIME_SLOTS[0],
        })
        self.assertEqual(subject.preferred_days, ('Monday',))
        self.assertEqual(subject.preferred_time_slots, (TIME_SLOTS[0],))

    def test_from_dict_rejects_non_list_preferences(self):
        with self.assertRaises(ValueError):
            Subject.from_dict({'id': 'a', 'name': 'Art', 'professor': 'Dr. A',
                               'hoursPerWeek': 1, 'preferredDays': {'Monday': True}})

    def test_dict_keys(self):
        subject = Subject("1", "Art", "Dr. A", 2, preferred_days=("Monday",))
        data = subject.to_dict()
        self.assertEqual(data['hoursPerWeek'], 2)
        self.assertEqual(data['preferredDays'], ['Monday'])
        self.assertEqual(data['preferredTimeSlots'], [])
        self.assertEqual(Subject.from_dict(data), subject)

    def test_entry_from_dict(self):
        subject = Subject("1", "Art", "Dr. A", 2)
        entry = ScheduleEntry.from_dict(ScheduleEntry("Monday", TIME_SLOTS[1], subject).to_dict())
        self.assertEqual(entry.subject, subject)
        self.assertIsNone(ScheduleEntry.from_dict({'day': 'Monday', 'time': TIME_SLOTS[1]}).subject)


if __name__ == "__main__":
    unittest.main()
