import json

import pytest

from secrets_api_client.cli.exceptions import SerializationError
from secrets_api_client.cli.ui import format_object, format_table, render

FIELDS = ("id", "name", "description")

RECORDS = [
    {"id": "backend", "name": "Backend", "description": "Backend services"},
    {"id": "frontend", "name": "Frontend", "description": ""},
    {"id": "007", "name": "Agents", "description": "numbers stay verbatim"},
]


def test_format_table():
    objs = [
        {"a": 1, "b": 10},
        {"a": 2, "b": 20},
    ]
    assert [line.split() for line in format_table(objs, keys=("a", "b")).splitlines()] == [
        ["a", "b"],
        ["1", "10"],
        ["2", "20"],
    ]


@pytest.mark.parametrize("records", [[], RECORDS[:1], RECORDS])
def test_table_has_header_and_one_line_per_record(records):
    lines = render(records, FIELDS).splitlines()
    assert len(lines) == len(records) + 1


def test_table_header_follows_field_order():
    header = render(RECORDS, ("name", "id")).splitlines()[0].split()
    assert header == ["name", "id"]


def test_table_values_are_aligned_with_header():
    lines = render(RECORDS[:1], ("name", "id")).splitlines()
    assert lines[1].split() == ["Backend", "backend"]


def test_table_keeps_received_order():
    lines = render(RECORDS, FIELDS).splitlines()[1:]
    assert [line.split()[0] for line in lines] == ["backend", "frontend", "007"]


def test_table_renders_missing_fields_as_empty():
    lines = render([{"id": "backend"}], ("id", "setup_at")).splitlines()
    assert lines[1].strip() == "backend"


def test_single_record_renders_as_single_row():
    lines = render(RECORDS[0], FIELDS).splitlines()
    assert len(lines) == 2
    assert lines[1].split()[0] == "backend"


@pytest.mark.parametrize("result", [RECORDS, RECORDS[0], []])
def test_json_round_trips(result):
    assert json.loads(render(result, FIELDS, as_json=True)) == result


def test_json_contains_all_fields():
    record = {**RECORDS[0], "created_at": "2020-01-01T00:00:00Z"}
    assert json.loads(render(record, FIELDS, as_json=True)) == record


def test_json_serialization_failure():
    with pytest.raises(SerializationError):
        render([{"id": object()}], FIELDS, as_json=True)


def test_render_string():
    assert render("some text") == "some text"


def test_format_object():
    assert format_object({"name": "a", "url": "b"}, ["name", "url"]) == "name: a\nurl : b"
