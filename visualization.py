import html
import os
from typing import List

import pandas as pd

from data_models import ScheduleEntry, DAYS, TIME_SLOTS
from schedule_printer import schedule_records

PAGE_HEAD = '''
<!DOCTYPE html>
<html>
<head>
    <title>University Timetable</title>
    <style>
        body {font-family: Arial, sans-serif; margin: 20px;}
        h2 {background-color: #3B82F6; color: white; padding: 10px;}
        table {width: 100%; border-collapse: collapse; margin-bottom: 30px;}
        th, td {border: 1px solid #dddddd; padding: 8px; text-align: left; vertical-align: top;}
        th {background-color: #f2f2f2;}
        tr:nth-child(even) {background-color: #fafafa;}
        .professor {font-style: italic; color: #555;}
    </style>
</head>
<body>
    <h1>Weekly Timetable</h1>
'''

PAGE_TAIL = '''
</body>
</html>
'''


def build_html(schedule: List[ScheduleEntry]) -> str:
    df = pd.DataFrame(schedule_records(schedule),
                      columns=['day', 'time', 'subject_id', 'subject', 'professor', 'color'])
    if df.empty:
        return PAGE_HEAD + '    <p>No classes scheduled.</p>\n' + PAGE_TAIL

    df['day_order'] = df['day'].map({day: i for i, day in enumerate(DAYS)})
    df['time_order'] = df['time'].map({time: i for i, time in enumerate(TIME_SLOTS)})
    df = df.sort_values(['day_order', 'time_order'])

    html_content = PAGE_HEAD
    for day, day_df in df.groupby('day', sort=False):
        html_content += f'<h2>{html.escape(day)}</h2>\n'
        html_content += '''
    <table>
        <tr>
            <th>Time</th>
            <th>Subject</th>
            <th>Professor</th>
        </tr>
    '''
        for _, row in day_df.iterrows():
            html_content += f'''
        <tr>
            <td>{html.escape(row["time"])}</td>
            <td style="border-left: 6px solid {html.escape(row["color"])}">{html.escape(row["subject"])}</td>
            <td class="professor">{html.escape(row["professor"])}</td>
        </tr>
        '''
        html_content += '</table>\n'

    return html_content + PAGE_TAIL


def write_html(schedule: List[ScheduleEntry], html_file_path: str) -> str:
    os.makedirs(os.path.dirname(os.path.abspath(html_file_path)), exist_ok=True)
    with open(html_file_path, 'w', encoding='utf-8') as f:
        f.write(build_html(schedule))
    return html_file_path
