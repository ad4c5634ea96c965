"""Import of daily progress rows pasted from a spreadsheet or read from a file."""
import logging
import re
from pathlib import Path

from scrum_charts.generator import day_label
from scrum_charts.models import DaySample

logger = logging.getLogger(__name__)

MIN_CELLS = 3

EXAMPLE_GRID = "\n".join([
    "Day\tPlanned\tMade",
    "Start\t0\t0",
    "Day 1\t5\t3",
    "Day 2\t10\t8",
    "Day 3\t15\t12",
    "Day 4\t20\t18",
    "Day 5\t25\t22",
    "Day 6\t30\t28",
    "Day 7\t35\t32",
    "Day 8\t40\t38",
    "Day 9\t45\t44",
    "Day 10\t50\t48",
])

# Leading numeric prefix, so "12 pts" reads as 12 the way spreadsheet pastes expect.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


class ParseError(ValueError):
    """Raised when pasted or imported text yields no usable rows."""


def parse_number(cell: str) -> float:
    """Parse the leading number in ``cell``; anything unparsable is 0."""
    match = _NUMBER_PREFIX.match(cell.strip())
    if not match:
        return 0
    value = float(match.group())
    return int(value) if value.is_integer() else value


def parse_grid(raw_text: str, delimiter: str = "\t") -> list[DaySample]:
    """Turn delimited text (Day, Planned, Made) into day samples.

    Lines with fewer than three cells are skipped without complaint, so a
    stray blank or note line does not abort the import. A header row has
    three cells and therefore comes through as a row scored 0/0.

    Raises:
        ParseError: if no line produced a row.
    """
    samples = []
    for index, line in enumerate(raw_text.strip().split("\n")):
        cells = [cell.strip() for cell in line.split(delimiter)]
        if len(cells) < MIN_CELLS:
            continue
        samples.append(DaySample(
            label=cells[0] or day_label(index),
            planned_score=parse_number(cells[1]),
            made_score=parse_number(cells[2]),
        ))
    if not samples:
        raise ParseError("Error parsing grid data. Please ensure format: Day [TAB] Planned [TAB] Made")
    logger.debug("Parsed %d rows from grid input", len(samples))
    return samples


def read_workbook_grid(file_path: str) -> str:
    """Flatten the first worksheet of an .xlsx workbook into tab-separated text."""
    from openpyxl import load_workbook
    workbook = load_workbook(file_path, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        lines = []
        for row in sheet.iter_rows(values_only=True):
            lines.append("\t".join("" if value is None else str(value) for value in row))
    finally:
        workbook.close()
    return "\n".join(lines)


def import_file(file_path: str) -> list[DaySample]:
    """Read day samples from a .tsv/.txt, .csv or .xlsx file."""
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        samples = parse_grid(path.read_text(encoding="utf-8-sig"), delimiter=",")
    elif suffix in (".xlsx", ".xlsm"):
        samples = parse_grid(read_workbook_grid(file_path))
    else:
        # .tsv, .txt and anything else: treat as a tab-separated paste
        samples = parse_grid(path.read_text(encoding="utf-8-sig"))
    logger.info("Imported %d rows from %s", len(samples), path.name)
    return samples
