from click import unstyle

from tick.core.queries import FilterOptions, filter_tasks
from tick.task.format import format_task_json, format_task_table


def test_table_has_id_column_by_default(sample_store, now):
    lines = unstyle(format_task_table(filter_tasks(sample_store), now)).splitlines()
    assert lines[0].startswith("| # | Name")
    assert set(lines[1]) == {"="}
    assert len(lines) == 2 + 3
    assert lines[2].startswith("| 1 | Write report")
    assert "work" in lines[2]
    assert "overdue" in lines[2]


def test_table_all_mode_drops_ids(sample_store, now):
    result = filter_tasks(sample_store, FilterOptions(include_complete=True))
    lines = unstyle(format_task_table(result, now)).splitlines()
    assert lines[0].startswith("| Name")
    done_row = next(line for line in lines if "File taxes" in line)
    assert "✓" in done_row


def test_table_columns_aligned(sample_store, now):
    lines = unstyle(format_task_table(filter_tasks(sample_store), now)).splitlines()
    row_lengths = {len(line) for line in lines}
    assert len(row_lengths) == 1


def test_table_empty_result(now):
    from tick.core.models import Store

    lines = unstyle(format_task_table(filter_tasks(Store()), now)).splitlines()
    assert lines == ["| # | Name | Tags | Due | Done |", "=" * 32]


def test_json_rows(sample_store):
    rows = format_task_json(filter_tasks(sample_store))
    assert rows[1] == {
        "id": 2,
        "name": "Buy milk",
        "tags": ["home", "errand"],
        "deadline": "2025-03-07 18:00",
        "complete": False,
    }


def test_json_all_mode_omits_ids(sample_store):
    rows = format_task_json(filter_tasks(sample_store, FilterOptions(include_complete=True)))
    assert all("id" not in row for row in rows)
    assert len(rows) == 4


def test_due_column_without_now_is_plain(sample_store):
    table = format_task_table(filter_tasks(sample_store))
    assert "2025-04-01 17:00 |" in table
    assert "due in" not in table


def test_overdue_and_done_rows_styled(sample_store, now):
    result = filter_tasks(sample_store, FilterOptions(include_complete=True))
    lines = format_task_table(result, now).splitlines()
    overdue_row = next(line for line in lines if "Write report" in line)
    done_row = next(line for line in lines if "File taxes" in line)
    plain_row = next(line for line in lines if "Plan trip" in line)
    assert overdue_row.startswith("\x1b[31m")
    assert "\x1b[9m" in done_row
    assert "\x1b[" not in plain_row
