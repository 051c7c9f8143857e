from staff_attendance.attendance.ledger import AttendanceLedger
from staff_attendance.attendance.model import AttendanceEntry, EntryState
from staff_attendance.core.enums import AttendanceStatus


def test_set_then_get_returns_pair():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")

    assert ledger.get("2024-05-01", "Alice") == EntryState(AttendanceStatus.ABSENT, "sick")


def test_second_set_overwrites_instead_of_appending():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-01", "Alice", AttendanceStatus.TRAINING, "course")

    assert len(ledger.day("2024-05-01")) == 1
    assert ledger.get("2024-05-01", "Alice") == EntryState(AttendanceStatus.TRAINING, "course")


def test_present_clears_reason():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-01", "Alice", AttendanceStatus.PRESENT)

    assert ledger.get("2024-05-01", "Alice") == EntryState(AttendanceStatus.PRESENT, "")


def test_switching_away_from_present_keeps_prior_reason():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-01", "Alice", AttendanceStatus.HALF_DAY)

    assert ledger.get("2024-05-01", "Alice").reason == "sick"


def test_unspecified_fields_default_to_empty():
    ledger = AttendanceLedger()
    state = ledger.set("2024-05-01", "Alice", reason="late train")

    assert state == EntryState(AttendanceStatus.UNSET, "late train")


def test_get_missing_returns_none():
    assert AttendanceLedger().get("2024-05-01", "Nobody") is None


def test_rename_moves_every_entry():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-02", "Alice", AttendanceStatus.PRESENT)
    ledger.set("2024-05-02", "Bob", AttendanceStatus.HOLIDAY, "trip")

    ledger.rename_employee("Alice", "Alicia")

    for day in ledger.dates():
        assert "Alice" not in ledger.day(day)
    assert ledger.get("2024-05-01", "Alicia") == EntryState(AttendanceStatus.ABSENT, "sick")
    assert ledger.get("2024-05-02", "Alicia") == EntryState(AttendanceStatus.PRESENT, "")
    assert ledger.get("2024-05-02", "Bob") == EntryState(AttendanceStatus.HOLIDAY, "trip")


def test_rename_moved_entry_wins_on_collision():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-01", "Bob", AttendanceStatus.PRESENT)

    ledger.rename_employee("Alice", "Bob")

    assert ledger.day("2024-05-01") == {"Bob": EntryState(AttendanceStatus.ABSENT, "sick")}


def test_remove_employee_purges_only_that_name():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    ledger.set("2024-05-01", "Bob", AttendanceStatus.PRESENT)
    ledger.set("2024-05-02", "Alice", AttendanceStatus.PRESENT)

    ledger.remove_employee("Alice")

    assert all("Alice" not in ledger.day(d) for d in ledger.dates())
    assert ledger.get("2024-05-01", "Bob") == EntryState(AttendanceStatus.PRESENT, "")


def test_snapshot_is_not_mutated_by_later_writes():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick")
    snap = ledger.snapshot()

    ledger.set("2024-05-01", "Alice", AttendanceStatus.PRESENT)
    ledger.remove_employee("Alice")

    assert snap["2024-05-01"]["Alice"] == EntryState(AttendanceStatus.ABSENT, "sick")


def test_from_entries_and_is_empty():
    assert AttendanceLedger().is_empty()

    ledger = AttendanceLedger.from_entries(
        [
            AttendanceEntry("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick"),
            AttendanceEntry("2024-05-01", "Bob", AttendanceStatus.PRESENT, ""),
        ]
    )

    assert not ledger.is_empty()
    assert sorted(e.employee for e in ledger.entries()) == ["Alice", "Bob"]


def test_ledger_with_only_emptied_days_is_empty():
    ledger = AttendanceLedger()
    ledger.set("2024-05-01", "Alice", AttendanceStatus.PRESENT)
    ledger.remove_employee("Alice")

    assert ledger.is_empty()
