from pathlib import Path

import report

DATA_DIR = Path(__file__).parent.parent / "data"


def test_report_falls_back_to_sample_rows(tmp_path, capsys):
    chart = tmp_path / "headcount.png"
    report.run_analysis(
        employees_path=str(tmp_path / "missing.csv"),
        reviews_path=str(tmp_path / "missing.csv"),
        chart_path=str(chart),
    )
    out = capsys.readouterr().out
    assert "built-in sample rows" in out
    assert "Nobody currently employed matches." in out
    assert "1042 days (2010-12-02 -> 2013-10-09)" in out
    assert "641 days" in out
    assert "5 reviews reference unknown employee ids [10, 11, 12, 13, 22]" in out
    assert chart.exists() and chart.stat().st_size > 0


def test_report_reads_csv_files(tmp_path, capsys):
    chart = tmp_path / "headcount.png"
    engine = report.run_analysis(
        employees_path=str(DATA_DIR / "employees.csv"),
        reviews_path=str(DATA_DIR / "annual_reviews.csv"),
        chart_path=str(chart),
        prefix="S",
    )
    out = capsys.readouterr().out
    assert "Reading" in out
    assert "Kelly Smalls" in out and "Nancy Soley" in out
    assert len(engine.employees) == 6
