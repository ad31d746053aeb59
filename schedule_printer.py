# schedule_printer.py

from data_models import ScheduleEntry
from typing import List, Dict, Any
import json
import os


def schedule_records(schedule: List[ScheduleEntry]) -> List[Dict[str, Any]]:
    """Flat records for the occupied cells, in grid order."""
    records = []
    for entry in schedule:
        if not entry.is_occupied:
            continue
        subject = entry.subject
        records.append({
            'day': entry.day,
            'time': entry.time,
            'subject_id': subject.id,
            'subject': subject.name,
            'professor': subject.professor,
            'color': subject.color,
        })
    return records


def print_schedule(schedule: List[ScheduleEntry]):
    """Print the generated schedule in a readable format"""
    print("\nGenerated Schedule:")
    print("-" * 100)

    current_day = None
    for entry in schedule:
        # Print day header if new day
        if current_day != entry.day:
            current_day = entry.day
            print(f"\n{current_day}")
            print("-" * 100)

        if entry.is_occupied:
            print(f"Time: {entry.time:<20} | "
                  f"Subject: {entry.subject.name} | "
                  f"Professor: {entry.subject.professor}")
        else:
            print(f"Time: {entry.time:<20} | Free")


def save_schedule_json(schedule: List[ScheduleEntry], output_file: str):
    output_dir = os.path.dirname(os.path.abspath(output_file))
    os.makedirs(output_dir, exist_ok=True)

    with open(output_file, 'w') as f:
        json.dump(schedule_records(schedule), f, indent=4)
