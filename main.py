import argparse
import json
import logging
import os
import sys

import config
from accuracy_checker import validate_schedule, summarize_schedule, print_summary
from data_models import Subject
from schedule_printer import print_schedule, save_schedule_json
from timetable import TimeTable

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="University timetable generator")
    parser.add_argument("--store", default=config.STORE_FILE,
                        help="JSON key-value store holding the saved timetable")
    parser.add_argument("--subjects", default=None,
                        help="JSON file with a list of subject records to schedule")
    parser.add_argument("--output-dir", default=config.OUTPUT_DIR)
    parser.add_argument("--html", action="store_true", help="also write an HTML timetable")
    parser.add_argument("--pdf", action="store_true", help="also write a PDF timetable")
    parser.add_argument("--excel", action="store_true", help="also write an Excel timetable")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def load_subjects(path):
    with open(path, 'r', encoding='utf-8') as f:
        records = json.load(f)
    return [Subject.from_dict(record) for record in records]


def main(argv=None):
    args = parse_args(argv)
    config.setup_logging(args.log_level, args.log_file)

    timetable = TimeTable(args.store)
    if args.subjects:
        timetable.subjects = load_subjects(args.subjects)
        logger.info("Loaded %d subjects from %s", len(timetable.subjects), args.subjects)

    if not timetable.subjects:
        logger.error("No subjects to schedule; pass --subjects or add some first")
        return 1

    schedule = timetable.generate()
    print_schedule(schedule)

    result = validate_schedule(schedule)
    for error in result.errors:
        logger.error(error)

    print("\nSummary:")
    print_summary(summarize_schedule(timetable.subjects, schedule))
    stats = timetable.statistics()
    print(f"Subjects: {stats['total_subjects']}, Hours/Week: {stats['total_hours']}, "
          f"Professors: {stats['unique_professors']}")

    save_schedule_json(schedule, os.path.join(args.output_dir, config.SCHEDULE_JSON))
    if args.html:
        from visualization import write_html
        write_html(schedule, os.path.join(args.output_dir, config.SCHEDULE_HTML))
    if args.pdf or args.excel:
        from schedule_exporter import export_to_pdf, export_to_excel
        if args.pdf:
            export_to_pdf(schedule, os.path.join(args.output_dir, config.SCHEDULE_PDF))
        if args.excel:
            export_to_excel(schedule, os.path.join(args.output_dir, config.SCHEDULE_XLSX))

    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
