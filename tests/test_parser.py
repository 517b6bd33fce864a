import pytest

from jobsched.exceptions import DuplicateTaskError, MalformedInputError
from jobsched.graph import load_tasks_csv, parse_project_file, parse_project_text, parse_task_line


def test_parse_task_line_with_predecessors():
    spec = parse_task_line("4 Plumbing 4 2 2 3 0")
    assert spec.task_id == 4
    assert spec.name == "Plumbing"
    assert spec.duration == 4
    assert spec.staff == 2
    assert spec.predecessor_ids == (2, 3)


def test_parse_task_line_without_predecessors():
    spec = parse_task_line("1 Foundation 4 3 0")
    assert spec.predecessor_ids == ()


def test_parse_task_line_ignores_tokens_after_sentinel():
    spec = parse_task_line("2 B 1 1 1 0 trailing")
    assert spec.predecessor_ids == (1,)


def test_duplicate_predecessors_are_collapsed():
    spec = parse_task_line("3 C 1 1 1 2 1 0")
    assert spec.predecessor_ids == (1, 2)


@pytest.mark.parametrize("line", [
    "1 A 2",
    "1 A 2 1",
    "1 A 2 1 2",
    "x A 2 1 0",
    "1 A two 1 0",
    "1 A 2 1 y 0",
    "1 A -2 1 0",
    "1 A 2 -1 0",
    "0 A 2 1 0",
])
def test_parse_task_line_rejects_malformed(line):
    with pytest.raises(MalformedInputError):
        parse_task_line(line, line_no=3)


def test_error_carries_line_number():
    with pytest.raises(MalformedInputError) as exc:
        parse_task_line("1 A 2", line_no=7)
    assert exc.value.line_no == 7
    assert "7" in str(exc.value)


def test_parse_project_text_skips_blank_lines():
    text = "3\n\n1 A 2 1 0\n2 B 3 2 1 0\n\n3 C 1 1 1 0\n"
    specs = parse_project_text(text)
    assert [s.task_id for s in specs] == [1, 2, 3]


@pytest.mark.parametrize("text", ["", "\n\n", "abc\n1 A 1 1 0", "0\n", "2\n1 A 1 1 0"])
def test_parse_project_text_rejects_bad_header_or_count(text):
    with pytest.raises(MalformedInputError):
        parse_project_text(text)


def test_parse_project_text_rejects_duplicate_ids():
    with pytest.raises(DuplicateTaskError) as exc:
        parse_project_text("2\n1 A 1 1 0\n1 B 1 1 0\n")
    assert exc.value.task_id == 1
    assert exc.value.line_no == 3


def test_parse_project_file(house_file):
    specs = parse_project_file(house_file)
    assert len(specs) == 8
    assert specs[-1].predecessor_ids == (3, 7)


def test_parse_project_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_project_file(str(tmp_path / "missing.txt"))


def test_load_tasks_csv(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "task_id,name,duration,staff,predecessors\n"
        "1,A,2,1,\n"
        "2,B,3,2,1\n"
        "3,C,1,1,1;2\n"
        "4,D,1,1,2 3\n",
        encoding="utf-8",
    )
    specs = load_tasks_csv(str(path))
    assert [s.predecessor_ids for s in specs] == [(), (1,), (1, 2), (2, 3)]


def test_load_tasks_csv_rejects_missing_column(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("task_id,name,duration\n1,A,2\n", encoding="utf-8")
    with pytest.raises(MalformedInputError):
        load_tasks_csv(str(path))


def test_load_tasks_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tasks_csv(str(tmp_path / "none.csv"))
