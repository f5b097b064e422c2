"""
Unit tests for the static registries.

Tests category and transformation lookup, emoji palette loading and task ID
allocation against persisted task files.
"""

import tempfile
from pathlib import Path

import pytest

from mission_puzzles.data.models import DIFFICULTIES, TransformationKind
from mission_puzzles.exceptions import ConfigError, TaskIdExhaustedError
from mission_puzzles.generators import get_generator
from mission_puzzles.templates import (
    CATEGORY_TEMPLATES,
    STORY_TEMPLATES,
    TRANSFORMATION_TEMPLATES,
    TaskIdAllocator,
    default_emoji_sets,
    get_category,
    get_domain_contexts,
    get_transformation,
    load_emoji_sets,
    max_task_number,
    transformation_types,
)


@pytest.mark.unit
class TestCategoryTemplates:
    """Tests for the category registry."""

    def test_expected_codes(self):
        assert set(CATEGORY_TEMPLATES) == {"OS", "PL", "FS", "NAV", "COM", "PWR", "SEC"}

    def test_codes_match_keys(self):
        for code, template in CATEGORY_TEMPLATES.items():
            assert template.category_code == code
            assert template.base_points > 0

    def test_every_category_palette_exists(self):
        palettes = default_emoji_sets()
        for template in CATEGORY_TEMPLATES.values():
            assert template.emoji_set in palettes

    def test_get_category(self):
        assert get_category("COM").base_points == 400
        assert get_category("XYZ") is None

    def test_domain_contexts_fall_back_to_communications(self):
        assert get_domain_contexts("NAV") != get_domain_contexts("COM")
        assert get_domain_contexts("XYZ") == get_domain_contexts("COM")


@pytest.mark.unit
class TestTransformationTemplates:
    """Tests for the transformation registry."""

    def test_every_kind_has_a_template(self):
        assert set(transformation_types()) == {kind.value for kind in TransformationKind}

    def test_templates_are_consistent(self):
        for template in TRANSFORMATION_TEMPLATES:
            assert template.generator.value == template.type
            assert template.difficulty in DIFFICULTIES
            assert len(template.hint_patterns) == 3
            assert get_generator(template.generator) is not None

    def test_get_transformation(self):
        assert get_transformation("rotation_90deg").name == "90° Rotation"
        assert get_transformation(TransformationKind.XOR_OPERATION).type == "xor_operation"
        assert get_transformation("spiral") is None
        assert get_transformation(None) is None

    def test_render(self):
        template = get_transformation("horizontal_reflection")
        assert template.render_title("signal strength") == "signal strength Mirror Analysis"
        assert "the power grid by" in template.render_description("power grid")


@pytest.mark.unit
class TestEmojiSets:
    """Tests for emoji palette loading."""

    def test_bundled_palettes(self):
        palettes = default_emoji_sets()
        assert "status_main" in palettes
        assert all(len(symbols) == 10 for symbols in palettes.values())

    def test_load_custom_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "sets.yaml"
            path.write_text("digits: [a, b, c, d, e, f, g, h, i, j]\n", encoding="utf-8")
            assert load_emoji_sets(path) == {"digits": list("abcdefghij")}

    def test_short_palette_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "sets.yaml"
            path.write_text("digits: [a, b]\n", encoding="utf-8")
            with pytest.raises(ConfigError):
                load_emoji_sets(path)

    def test_non_mapping_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "sets.yaml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with pytest.raises(ConfigError):
                load_emoji_sets(path)


@pytest.mark.unit
class TestStoryTemplates:

    def test_story_kinds_are_known(self):
        assert set(STORY_TEMPLATES) <= set(TransformationKind)
        for templates in STORY_TEMPLATES.values():
            for template in templates:
                assert len(template.title) < 60


@pytest.mark.unit
class TestTaskIdAllocator:
    """Tests for sequential ID allocation."""

    def test_max_task_number(self):
        names = ["COM-100.json", "COM-107.json", "COM-12.json", "NAV-300.json", "COM-105.txt"]
        assert max_task_number("COM", names) == 107
        assert max_task_number("SEC", names) is None

    def test_fresh_allocator_starts_at_100(self):
        allocator = TaskIdAllocator()
        assert allocator.next_id("COM") == "COM-100"
        assert allocator.next_id("COM") == "COM-101"
        assert allocator.next_id("NAV") == "NAV-100"

    def test_seed_never_goes_below_start(self):
        allocator = TaskIdAllocator()
        assert allocator.seed("OS", ["OS-001.json", "OS-042.json"]) == 100
        assert allocator.next_id("OS") == "OS-100"

    def test_exhausted_category_raises(self):
        allocator = TaskIdAllocator()
        allocator.seed("COM", ["COM-998.json"])

        assert allocator.next_id("COM") == "COM-999"
        with pytest.raises(TaskIdExhaustedError):
            allocator.next_id("COM")
        with pytest.raises(TaskIdExhaustedError):
            allocator.next_id("COM")
        assert allocator.next_id("NAV") == "NAV-100"

    def test_seeds_from_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            task_dir = Path(tmpdir)
            for name in ["COM-100.json", "COM-103.json", "NAV-120.json"]:
                (task_dir / name).write_text("{}", encoding="utf-8")

            allocator = TaskIdAllocator(task_dir)
            assert allocator.next_id("COM") == "COM-104"
            assert allocator.next_id("NAV") == "NAV-121"
            assert allocator.next_id("SEC") == "SEC-100"

    def test_missing_directory_counts_as_empty(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            allocator = TaskIdAllocator(Path(tmpdir) / "not-yet-created")
            assert allocator.next_id("PL") == "PL-100"

    def test_seeding_happens_once(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            task_dir = Path(tmpdir)
            allocator = TaskIdAllocator(task_dir)
            assert allocator.next_id("FS") == "FS-100"
            assert allocator.is_seeded("FS")

            # Files written after seeding are not rescanned
            (task_dir / "FS-150.json").write_text("{}", encoding="utf-8")
            assert allocator.next_id("FS") == "FS-101"

    def test_custom_start(self):
        allocator = TaskIdAllocator(start=500)
        assert allocator.next_id("SEC") == "SEC-500"
