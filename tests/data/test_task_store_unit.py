"""
Unit tests for the task data model and task files.

Tests the camelCase JSON layout, lenient parsing of incomplete records and
reading/writing task files on disk.
"""

import json
import tempfile
from pathlib import Path

import pytest

from mission_puzzles.data import TaskDefinition, TaskStore, read_task, write_task
from mission_puzzles.data.models import ExamplePair, TransformationKind
from mission_puzzles.exceptions import TaskFileError


@pytest.mark.unit
class TestTaskDefinition:
    """Tests for TaskDefinition serialization."""

    def test_to_dict_uses_camel_case(self, valid_task):
        data = valid_task.to_dict()

        assert data["gridSize"] == 2
        assert data["basePoints"] == 400
        assert data["requiredRankLevel"] == 1
        assert data["emojiSet"] == "tech_set2"
        assert data["testInput"] == [[8, 9], [1, 0]]
        assert data["examples"][0] == {"input": [[1, 2], [3, 4]], "output": [[2, 1], [4, 3]]}
        assert data["transformationType"] == "horizontal_reflection"
        assert "generated" not in data

    def test_generated_flag_written(self, valid_task):
        valid_task.generated = True
        assert valid_task.to_dict()["generated"] is True

    def test_untagged_task_omits_type(self, valid_task):
        valid_task.transformation_type = None
        assert "transformationType" not in valid_task.to_dict()

    def test_from_dict_round_trip(self, valid_task):
        restored = TaskDefinition.from_dict(valid_task.to_dict())
        assert restored == valid_task

    def test_unknown_keys_preserved(self, valid_task_dict):
        valid_task_dict["author"] = "ops-team"
        task = TaskDefinition.from_dict(valid_task_dict)
        assert task.extra == {"author": "ops-team"}
        assert task.to_dict()["author"] == "ops-team"

    def test_from_dict_incomplete(self):
        task = TaskDefinition.from_dict({"id": "COM-100", "examples": "oops"})
        assert task.id == "COM-100"
        assert task.examples is None
        assert task.hints is None
        assert task.generated is False

    def test_non_mapping_example(self):
        task = TaskDefinition.from_dict({"examples": [["not", "a", "pair"]]})
        assert task.examples == [ExamplePair(input_grid=None, output_grid=None)]

    def test_test_case(self, valid_task):
        assert valid_task.test_case == ExamplePair([[8, 9], [1, 0]], [[9, 8], [0, 1]])

    def test_kind_lookup(self):
        assert TransformationKind.from_value("xor_operation") is TransformationKind.XOR_OPERATION
        assert TransformationKind.from_value("nope") is None
        assert TransformationKind.from_value(None) is None


@pytest.mark.unit
class TestTaskStore:
    """Tests for reading and writing task files."""

    def test_save_and_load(self, valid_task):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = TaskStore(Path(tmpdir) / "tasks")
            path = store.save(valid_task)

            assert path.name == "COM-101.json"
            assert store.load_task("COM-101") == valid_task
            assert store.persisted_filenames() == ["COM-101.json"]

    def test_file_is_indented_utf8(self, valid_task):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "COM-101.json"
            write_task(valid_task, path)

            text = path.read_text(encoding="utf-8")
            assert "📡 Communications" in text
            assert text.startswith('{\n  "id": "COM-101"')

    def test_load_missing_task(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(FileNotFoundError):
                TaskStore(tmpdir).load_task("COM-999")

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "COM-100.json"
            path.write_text("{invalid", encoding="utf-8")
            with pytest.raises(json.JSONDecodeError):
                read_task(path)

    def test_json_array_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "COM-100.json"
            path.write_text("[1, 2, 3]", encoding="utf-8")
            with pytest.raises(TaskFileError) as excinfo:
                read_task(path)
            assert "expected a JSON object" in str(excinfo.value)

    def test_find_task_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            task_dir = Path(tmpdir)
            (task_dir / "nested").mkdir()
            (task_dir / "COM-100.json").write_text("{}", encoding="utf-8")
            (task_dir / "notes.txt").write_text("", encoding="utf-8")
            (task_dir / "nested" / "NAV-100.json").write_text("{}", encoding="utf-8")

            store = TaskStore(task_dir)
            assert [p.name for p in store.find_task_files()] == ["COM-100.json"]
            assert [p.name for p in store.find_task_files(recursive=True)] == ["COM-100.json", "NAV-100.json"]

    def test_persisted_filenames_missing_dir(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert TaskStore(Path(tmpdir) / "absent").persisted_filenames() == []
