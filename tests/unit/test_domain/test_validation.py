"""Tests for forest validation and the Result helpers."""

from tasktree.domain.shared import Err, Ok, is_err, is_ok, unwrap_or
from tasktree.domain.task import is_blank, validate_forest


class TestIsBlank:
    """Tests for is_blank."""

    def test_blank_values(self):
        assert is_blank("")
        assert is_blank("   ")
        assert is_blank("\t\n")

    def test_non_blank(self):
        assert not is_blank(" x ")


class TestValidateForest:
    """Tests for validate_forest."""

    def test_valid_forest(self, forest):
        """A well-formed forest comes back as Ok."""
        result = validate_forest(forest)
        assert is_ok(result)
        assert result.value == forest

    def test_list_becomes_tuple(self, forest):
        """The validated forest is always a tuple."""
        result = validate_forest(list(forest))
        assert isinstance(result.value, tuple)

    def test_duplicate_id_across_levels(self, task_factory):
        """Ids must be unique across depths, not just among siblings."""
        forest = (task_factory("x", subtasks=[task_factory("y")]), task_factory("y"))
        result = validate_forest(forest)
        assert is_err(result)
        assert "Duplicate task id: y" in result.error

    def test_blank_title(self, task_factory):
        """A whitespace title is rejected."""
        forest = (task_factory("x", subtasks=[task_factory("y", title="  ")]),)
        result = validate_forest(forest)
        assert is_err(result)
        assert "empty title" in result.error


class TestResultHelpers:
    """Tests for the Result helper functions."""

    def test_unwrap_or(self):
        assert unwrap_or(Ok(1), 0) == 1
        assert unwrap_or(Err("boom"), 0) == 0
