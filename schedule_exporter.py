# schedule_exporter.py
import logging
import os
from typing import List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pandas as pd
from openpyxl.utils import get_column_letter

from data_models import ScheduleEntry, DAYS, TIME_SLOTS

logger = logging.getLogger(__name__)

HEADER_COLOR = '#3B82F6'
TIME_COLUMN_WIDTH = 20
DAY_COLUMN_WIDTH = 25


def schedule_to_dataframe(schedule: List[ScheduleEntry], separator: str = ' ') -> pd.DataFrame:
    """Time slots as rows, days as columns, "Subject (Professor)" in each cell."""
    grid = pd.DataFrame("", index=TIME_SLOTS, columns=DAYS)
    grid.index.name = 'Time'
    for entry in schedule:
        if entry.is_occupied and entry.time in grid.index and entry.day in grid.columns:
            grid.at[entry.time, entry.day] = \
                f"{entry.subject.name}{separator}({entry.subject.professor})"
    return grid


def _ensure_parent(path: str):
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def export_to_pdf(schedule: List[ScheduleEntry], path: str = 'timetable.pdf') -> str:
    grid = schedule_to_dataframe(schedule, separator='\n')
    _ensure_parent(path)

    # A4 landscape
    fig, ax = plt.subplots(figsize=(11.69, 8.27))
    ax.axis('off')
    ax.set_title('University Timetable', loc='left', fontsize=18, fontweight='bold')

    cell_text = [[time] + list(row) for time, row in zip(grid.index, grid.values)]
    table = ax.table(
        cellText=cell_text,
        colLabels=['Time'] + DAYS,
        colWidths=[0.16] + [0.168] * len(DAYS),
        cellLoc='center',
        loc='upper center',
    )
    table.auto_set_font_size(False)
    table.set_fontsize(8)
    table.scale(1, 3.2)

    for (row, col), cell in table.get_celld().items():
        if row == 0:
            cell.set_facecolor(HEADER_COLOR)
            cell.set_text_props(color='white', fontweight='bold', fontsize=10)
        elif col == 0:
            cell.set_text_props(fontweight='bold')

    fig.savefig(path, format='pdf', bbox_inches='tight')
    plt.close(fig)
    logger.info("Wrote PDF timetable to %s", path)
    return path


def export_to_excel(schedule: List[ScheduleEntry], path: str = 'timetable.xlsx') -> str:
    grid = schedule_to_dataframe(schedule)
    _ensure_parent(path)

    with pd.ExcelWriter(path, engine='openpyxl') as writer:
        grid.to_excel(writer, sheet_name='Timetable', index_label='Time')
        ws = writer.sheets['Timetable']
        ws.column_dimensions[get_column_letter(1)].width = TIME_COLUMN_WIDTH
        for i in range(len(DAYS)):
            ws.column_dimensions[get_column_letter(i + 2)].width = DAY_COLUMN_WIDTH

    logger.info("Wrote Excel timetable to %s", path)
    return path
