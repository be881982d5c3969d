"""Tests for variant instances."""

from __future__ import annotations

import os
import threading

import pytest

import errorforge
from errorforge import VariantError


class TestInstanceFields:
    """Fields and predicates of instances built by the creators."""

    def test_creators_set_code_metadata_and_message(self, my_error, errors) -> None:
        for code, message in errors.items():
            error = getattr(my_error, code)("foo")

            assert error.code == code
            assert error.metadata == "foo"
            assert error.message == message
            assert error.name == "MyError"
            assert error.cause is None

    def test_only_the_matching_predicate_is_true(self, my_error, errors) -> None:
        for code in errors:
            error = getattr(my_error, code)()

            assert getattr(error, f"is{code}") is True
            assert error.has_code(code)
            for other in errors:
                if other != code:
                    assert getattr(error, f"is{other}") is False
                    assert not error.has_code(other)

    def test_metadata_is_kept_by_reference(self, my_error) -> None:
        metadata = {"attempt": 3}

        error = my_error.TimedOut(metadata)

        assert error.metadata is metadata

    def test_is_variant(self, my_error) -> None:
        assert my_error.Unexpected().is_variant is True

    @pytest.mark.parametrize("attribute", ["name", "code", "message", "metadata", "cause", "stack", "is_variant"])
    def test_fields_are_read_only(self, my_error, attribute: str) -> None:
        error = my_error.TimedOut("meta")

        with pytest.raises(AttributeError):
            setattr(error, attribute, "changed")

    def test_predicates_are_read_only(self, my_error) -> None:
        error = my_error.TimedOut()

        with pytest.raises(AttributeError):
            error.isTimedOut = False


class TestMessageLookup:
    """Messages are read from the code table on every access."""

    def test_message_follows_later_edits_of_the_table(self, my_error, errors) -> None:
        error = my_error.TimedOut()

        errors["TimedOut"] = "The operation took too long."

        assert error.message == "The operation took too long."
        assert str(error) == "MyError: The operation took too long."

    def test_unknown_code_has_no_message(self, my_error) -> None:
        error = my_error("Nope", {"why": "escape hatch"})

        assert error.code == "Nope"
        assert error.metadata == {"why": "escape hatch"}
        assert error.message is None
        assert str(error) == "MyError: None"

    def test_code_added_later_gets_a_message_but_no_creator(self, my_error, errors) -> None:
        errors["Late"] = "Added after create()."

        assert my_error("Late").message == "Added after create()."
        assert not hasattr(my_error, "Late")


class TestCauseArgument:
    """How metadata and cause are told apart."""

    def test_exception_in_metadata_position_becomes_the_cause(self, my_error) -> None:
        original = ValueError("boom")

        error = my_error.Unexpected(original)

        assert error.metadata is None
        assert error.cause is original
        assert error.__cause__ is original

    def test_explicit_cause_keeps_an_exception_as_metadata(self, my_error) -> None:
        as_metadata = ValueError("kept as metadata")
        original = KeyError("k")

        error = my_error.Unexpected(metadata=as_metadata, cause=original)

        assert error.metadata is as_metadata
        assert error.cause is original

    def test_non_exception_cause_is_kept_without_chaining(self, my_error) -> None:
        error = my_error.Unexpected(None, "plain-value")

        assert error.cause == "plain-value"
        assert error.__cause__ is None

    def test_cause_is_the_original_object(self, my_error) -> None:
        inner = my_error.TimedOut("inner")

        with pytest.raises(my_error) as info:
            raise my_error.Unexpected(cause=inner)

        assert info.value.cause is inner
        assert info.value.isUnexpected


class TestStackCapture:
    def test_stack_starts_at_the_caller(self, my_error) -> None:
        error = my_error.TimedOut()

        lines = error.stack.splitlines()
        frames = [line for line in lines if line.startswith('  File "')]
        assert lines[0] == "Traceback (most recent call last):"
        assert lines[-1] == "MyError: TimedOut"
        assert frames[-1].endswith("in test_stack_starts_at_the_caller")
        assert not any(os.path.join("errorforge", "core") in frame for frame in frames)

    def test_direct_construction_also_starts_at_the_caller(self, my_error) -> None:
        error = my_error("Nope")

        frames = [line for line in error.stack.splitlines() if line.startswith('  File "')]
        assert frames[-1].endswith("in test_direct_construction_also_starts_at_the_caller")

    def test_stack_is_captured_at_construction(self, my_error) -> None:
        def build() -> VariantError:
            return my_error.Unexpected()

        error = build()

        assert "in build" in error.stack
        assert error.__traceback__ is None


class TestStringForms:
    def test_to_string_ignores_metadata(self, my_error, errors) -> None:
        error = my_error.TimedOut("ignored-meta")

        assert error.to_string() == f"MyError: {errors['TimedOut']}"
        assert str(error) == error.to_string()

    def test_detailed_string_is_the_stack(self, my_error) -> None:
        error = my_error.TimedOut()

        assert error.to_detailed_string() == error.stack

    def test_repr(self, my_error) -> None:
        assert repr(my_error.TimedOut({"a": 1})) == "MyError(code='TimedOut', metadata={'a': 1})"


def test_base_class_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        VariantError("TimedOut")


def test_instances_built_concurrently_are_independent(errors) -> None:
    variant = errorforge.create("Concurrent", errors)
    results: list[VariantError] = []
    lock = threading.Lock()

    def worker(index: int) -> None:
        error = variant.TimedOut({"worker": index})
        error.to_json()
        with lock:
            results.append(error)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(error.metadata["worker"] for error in results) == list(range(8))
    assert all(error.isTimedOut for error in results)
