# tests/test_exporter.py
from scrum_charts.exporter import CSV_HEADER, export_csv, format_score, to_csv
from scrum_charts.models import DaySample


def test_to_csv():
    samples = [DaySample("Start", 0, 0), DaySample("Day 1", 5, 3)]
    assert to_csv(samples) == "Day,Planned Score,Made Score\nStart,0,0\nDay 1,5,3"


def test_to_csv_empty_is_header_only():
    assert to_csv([]) == CSV_HEADER


def test_format_score():
    assert format_score(5) == "5"
    assert format_score(5.0) == "5"
    assert format_score(7.25) == "7.25"


def test_export_csv_writes_file(tmp_path):
    path = export_csv([DaySample("Start", 0, 0)], str(tmp_path / "sprint-data.csv"))
    assert path.read_text() == "Day,Planned Score,Made Score\nStart,0,0"
