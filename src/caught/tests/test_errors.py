"""Tests for the error capability and payload normalization."""

from __future__ import annotations

import copy
import pickle

import pytest

from caught import ThrownValueError, clear_settings_cache, is_error, message_of, normalize_error


class HttpError(Exception):
    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status


class Abort(BaseException):
    pass


def test_is_error() -> None:
    """Exceptions of any depth count as errors, plain values do not."""
    assert is_error(ValueError("x"))
    assert is_error(HttpError("x", 500))
    assert is_error(Abort())
    assert not is_error("oops")
    assert not is_error(42)
    assert not is_error({"message": "looks like an error"})
    assert not is_error(ValueError)  # the class, not an instance


def test_normalize_error_identity() -> None:
    """Errors are returned by identity, subclass and fields preserved."""
    exc = HttpError("not found", 404)

    result = normalize_error(exc)

    assert result is exc
    assert isinstance(result, HttpError)
    assert result.status == 404


def test_normalize_string_payload() -> None:
    """A raw string becomes a ThrownValueError that references it."""
    result = normalize_error("oops")

    assert isinstance(result, ThrownValueError)
    assert result != "oops"
    assert result.value == "oops"
    assert result.message == "Non-error value thrown: 'oops'"
    assert str(result) == result.message


@pytest.mark.parametrize("payload", [0, 3.5, None, ["a"], {"code": 7}, object()])
def test_normalize_arbitrary_payloads(payload: object) -> None:
    """Any non-error payload is wrapped and kept on .value."""
    result = normalize_error(payload)

    assert isinstance(result, ThrownValueError)
    assert result.value is payload
    assert repr(payload)[:20] in result.message


def test_thrown_value_error_is_exception() -> None:
    """The wrapper can be raised and caught like any exception."""
    with pytest.raises(ThrownValueError, match="oops"):
        raise normalize_error("oops")


def test_long_payload_truncated(monkeypatch: pytest.MonkeyPatch) -> None:
    """Payload reprs are cut down to the configured limit."""
    monkeypatch.setenv("CAUGHT_REPR_LIMIT", "10")
    clear_settings_cache()

    result = normalize_error("x" * 500)

    assert "..." in result.message
    assert len(result.message) < 60
    assert result.value == "x" * 500


def test_custom_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    """The message prefix comes from settings."""
    monkeypatch.setenv("CAUGHT_NON_ERROR_PREFIX", "Foreign failure:")
    clear_settings_cache()

    assert normalize_error(7).message == "Foreign failure: 7"


def test_message_of() -> None:
    """message_of prefers .message, then str(), then the class name."""
    assert message_of(ValueError("bad")) == "bad"
    assert message_of(normalize_error("oops")) == "Non-error value thrown: 'oops'"
    assert message_of(KeyboardInterrupt()) == "KeyboardInterrupt"

    exc = RuntimeError("shown")
    exc.message = 123  # type: ignore[attr-defined]
    assert message_of(exc) == "shown"


def test_message_of_unprintable() -> None:
    """A failing __str__ falls back to the class name."""
    class Unprintable(Exception):
        def __str__(self) -> str:
            raise RuntimeError("str broken")

    assert message_of(Unprintable()) == "Unprintable"


@pytest.mark.parametrize("clone", [copy.copy, copy.deepcopy, lambda e: pickle.loads(pickle.dumps(e))])
def test_thrown_value_error_copies_keep_payload(clone: object) -> None:
    """Copies and pickles rebuild from the payload, not from the message."""
    original = normalize_error({"code": 7, "why": "oops"})

    restored = clone(original)  # type: ignore[operator]

    assert isinstance(restored, ThrownValueError)
    assert restored.value == {"code": 7, "why": "oops"}
    assert restored.message == original.message
    assert str(restored) == str(original)


def test_container_payload_not_cut_by_item_count() -> None:
    """Containers are shown in full while they fit the repr limit."""
    items = list(range(20))
    mapping = {f"k{i}": i for i in range(8)}

    assert repr(items) in normalize_error(items).message
    assert repr(mapping) in normalize_error(mapping).message


def test_container_payload_cut_by_length(monkeypatch: pytest.MonkeyPatch) -> None:
    """Long container reprs are cut to exactly the configured limit."""
    monkeypatch.setenv("CAUGHT_REPR_LIMIT", "40")
    clear_settings_cache()

    result = normalize_error(list(range(100)))

    summary = result.message.removeprefix("Non-error value thrown: ")
    assert len(summary) == 40
    assert summary.endswith("...")
    assert summary.startswith("[0, 1, 2")
