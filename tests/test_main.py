import json
import os
import shutil
import tempfile
import unittest

import main
from timetable import TimeTable


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.store = os.path.join(self.tmp_dir, 'store.json')
        self.output_dir = os.path.join(self.tmp_dir, 'output')

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_no_subjects(self):
        code = main.main(['--store', self.store, '--output-dir', self.output_dir])
        self.assertEqual(code, 1)

    def test_generates_from_subjects_file(self):
        subjects_file = os.path.join(self.tmp_dir, 'subjects.json')
        with open(subjects_file, 'w') as f:
            json.dump([
                {'id': 'a', 'name': 'Algebra', 'professor': 'Dr. Smith', 'hoursPerWeek': 3},
                {'id': 'b', 'name': 'Poetry', 'professor': 'Dr. Jones', 'hoursPerWeek': 2,
                 'preferredDays': ['Friday']},
            ], f)

        code = main.main(['--store', self.store, '--subjects', subjects_file,
                          '--output-dir', self.output_dir, '--html'])
        self.assertEqual(code, 0)

        with open(os.path.join(self.output_dir, 'schedule_output.json')) as f:
            records = json.load(f)
        self.assertEqual(len(records), 5)
        self.assertTrue(os.path.exists(os.path.join(self.output_dir, 'schedule_output.html')))

        saved = TimeTable(self.store)
        self.assertEqual([s.id for s in saved.subjects], ['a', 'b'])
        self.assertEqual(len(saved.schedule), 40)


if __name__ == "__main__":
    unittest.main()
