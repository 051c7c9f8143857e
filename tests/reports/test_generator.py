from datetime import date

from staff_attendance.attendance.ledger import AttendanceLedger
from staff_attendance.core.enums import AttendanceStatus, ReportMode
from staff_attendance.core.exceptions import NoDataError
from staff_attendance.reports.generator import Report, generate


def _ledger() -> AttendanceLedger:
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-01", "Bob", AttendanceStatus.PRESENT)
    ledger.set("2024-05-02", "Bob", AttendanceStatus.TRAINING)
    ledger.set("2024-04-30", "Alice", AttendanceStatus.HOLIDAY, "festival")
    ledger.set("2023-05-01", "Alice", AttendanceStatus.PRESENT)
    return ledger


def test_daily_report_scenario():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-01", "Bob", AttendanceStatus.PRESENT)

    report = generate(ledger, ReportMode.DAILY, date(2024, 5, 1), ["Alice", "Bob"])

    assert isinstance(report, Report)
    assert report.rows == [
        ["2024-05-01", "Alice", "Absent", "sick"],
        ["2024-05-01", "Bob", "Present", "-"],
        ["2024-05-01", "→ Summary", "P:1 | A:1 | T:0 | H:0 | Ho:0", "-"],
    ]


def test_daily_rows_follow_roster_order():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Bob", AttendanceStatus.PRESENT)
    ledger.set("2024-05-01", "Alice", AttendanceStatus.PRESENT)

    report = generate(ledger, ReportMode.DAILY, date(2024, 5, 1), ["Alice", "Bob"])

    assert [r[1] for r in report.rows[:-1]] == ["Alice", "Bob"]


def test_daily_without_entries_returns_no_data():
    result = generate(_ledger(), ReportMode.DAILY, date(2024, 5, 3), ["Alice", "Bob"])

    assert isinstance(result, NoDataError)


def test_empty_ledger_returns_no_data():
    result = generate(AttendanceLedger(), ReportMode.YEARLY, date(2024, 5, 3))

    assert isinstance(result, NoDataError)
    assert str(result) == "No attendance data available!"


def test_monthly_groups_dates_with_summary_rows():
    report = generate(_ledger(), ReportMode.MONTHLY, date(2024, 5, 15), ["Alice", "Bob"])

    assert report.rows == [
        ["2024-05-01", "Alice", "Absent", "sick"],
        ["2024-05-01", "Bob", "Present", "-"],
        ["2024-05-01", "→ Summary", "P:1 | A:1 | T:0 | H:0 | Ho:0", "-"],
        ["2024-05-02", "Bob", "Training", "-"],
        ["2024-05-02", "→ Summary", "P:0 | A:0 | T:1 | H:0 | Ho:0", "-"],
    ]
    assert report.dates == ["2024-05-01", "2024-05-02"]
    assert report.basename == "Attendance_2024-05"


def test_yearly_spans_all_months_of_anchor_year():
    report = generate(_ledger(), ReportMode.YEARLY, date(2024, 1, 1), ["Alice", "Bob"])

    assert report.dates == ["2024-04-30", "2024-05-01", "2024-05-02"]
    assert "2023-05-01" not in {r[0] for r in report.rows}
    assert report.basename == "Attendance_2024"


def test_monthly_outside_window_returns_no_data():
    result = generate(_ledger(), ReportMode.MONTHLY, date(2024, 6, 1))

    assert isinstance(result, NoDataError)


def test_unset_status_renders_placeholder():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", reason="pending")

    report = generate(ledger, ReportMode.DAILY, date(2024, 5, 1), ["Alice"])

    assert report.rows[0] == ["2024-05-01", "Alice", "-", "pending"]
    assert report.rows[1][2] == "P:0 | A:0 | T:0 | H:0 | Ho:0"


def test_unrecognised_status_is_rendered_raw_and_not_counted():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", status="Late", reason="bus")
    ledger.set("2024-05-01", "Bob", AttendanceStatus.PRESENT)

    report = generate(ledger, ReportMode.DAILY, date(2024, 5, 1), roster=["Alice", "Bob"])

    assert report.rows == [
        ["2024-05-01", "Alice", "Late", "bus"],
        ["2024-05-01", "Bob", "Present", "-"],
        ["2024-05-01", "→ Summary", "P:1 | A:0 | T:0 | H:0 | Ho:0", "-"],
    ]
