"""CSV export of the current day samples."""
import logging
from pathlib import Path

from scrum_charts.config import DEFAULT_EXPORT_FILENAME
from scrum_charts.models import DaySample

logger = logging.getLogger(__name__)

CSV_HEADER = "Day,Planned Score,Made Score"


def format_score(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_csv(samples: list[DaySample]) -> str:
    """Comma-joined rows under a fixed header. Labels are written unquoted."""
    lines = [CSV_HEADER]
    for s in samples:
        lines.append(f"{s.label},{format_score(s.planned_score)},{format_score(s.made_score)}")
    return "\n".join(lines)


def export_csv(samples: list[DaySample], file_path: str = DEFAULT_EXPORT_FILENAME) -> Path:
    path = Path(file_path)
    path.write_text(to_csv(samples))
    logger.info("Exported %d rows to %s", len(samples), path)
    return path
