"""Student identifier generation."""

import asyncio
import re
from contextlib import asynccontextmanager

from sqlalchemy.exc import OperationalError

from vhsa.directory import students
from vhsa.directory.students import StudentDirectory, next_unique_id, school_code_for


def test_school_code_from_parentheses():
    assert school_code_for("Lincoln Elementary (ln01)") == "ln01"
    assert school_code_for("Oak (Main) Campus (oc02)") == "Main"


def test_school_code_defaults_when_missing():
    assert school_code_for("Lincoln Elementary") == "st01"
    assert school_code_for("Lincoln Elementary", default="xx09") == "xx09"


def test_first_id_for_a_school():
    assert next_unique_id("ln01", []) == "ln0101"


def test_increments_highest_sequence_numerically():
    existing = ["ln0101", "ln0109", "ln0110", "ln0102"]
    assert next_unique_id("ln01", existing) == "ln0111"


def test_ignores_ids_with_non_numeric_suffix():
    assert next_unique_id("ln01", ["ln01a7", "ln0103"]) == "ln0104"


def test_sequence_grows_past_padding():
    assert next_unique_id("st01", ["st0199"]) == "st01100"


class _RecordingLogger:
    def __init__(self):
        self.warnings = []

    def warning(self, event, **kw):
        self.warnings.append((event, kw))


def test_lookup_failure_falls_back_to_timestamp_id(monkeypatch):
    @asynccontextmanager
    async def broken_db():
        raise OperationalError("SELECT unique_id", {}, Exception("database is locked"))
        yield

    recorder = _RecordingLogger()
    monkeypatch.setattr(students, "get_db", broken_db)
    monkeypatch.setattr(students, "logger", recorder)

    unique_id = asyncio.run(StudentDirectory().generate_unique_id("Lincoln Elementary (ln01)"))

    assert re.fullmatch(r"ln01\d{4}", unique_id)
    assert len(recorder.warnings) == 1
    event, kw = recorder.warnings[0]
    assert kw["school_code"] == "ln01"
    assert kw["unique_id"] == unique_id


def test_wildcard_characters_in_school_code_are_literal(add_student):
    first = add_student(school="Annex (a_1)")
    add_student(school="Annex (ab1)")
    second = add_student(school="Annex (a_1)")

    assert first["uniqueId"] == "a_101"
    assert second["uniqueId"] == "a_102"
