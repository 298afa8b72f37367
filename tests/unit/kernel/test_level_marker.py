"""Unit tests for Level, Marker and the kernel error hierarchy."""

from __future__ import annotations

import pytest

from capture_logger.kernel import BaseError, ContractViolationError, Level, Marker
from capture_logger.kernel.errors import require


class TestLevel:
    def test_ordering(self) -> None:
        assert Level.TRACE < Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (Level.WARN, Level.WARN),
            (20, Level.INFO),
            ("debug", Level.DEBUG),
            (" Error ", Level.ERROR),
            ("warning", Level.WARN),
        ],
    )
    def test_parse(self, raw: object, expected: Level) -> None:
        assert Level.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["verbose", 15, None, True, 2.0])
    def test_parse_rejects_unknown(self, raw: object) -> None:
        with pytest.raises(ContractViolationError):
            Level.parse(raw)

    def test_str_is_name(self) -> None:
        assert str(Level.TRACE) == "TRACE"


class TestMarker:
    def test_is_value_object(self) -> None:
        assert Marker("a") == Marker("a")
        assert hash(Marker("a")) == hash(Marker("a"))

    def test_contains_references(self) -> None:
        child = Marker("child")
        parent = Marker("parent").with_reference(child)
        assert parent.contains("parent")
        assert parent.contains(child)
        assert not child.contains(parent)

    def test_with_reference_is_idempotent(self) -> None:
        child = Marker("c")
        parent = Marker("p").with_reference(child)
        assert parent.with_reference(child) is parent
        assert str(parent) == "p [ c ]"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            Marker("")


class TestErrors:
    def test_contract_violation(self) -> None:
        with pytest.raises(ContractViolationError) as info:
            require(None, "logger name")
        assert info.value.argument == "logger name"
        assert info.value.code == "contract_violation"
        assert isinstance(info.value, BaseError)

    def test_require_passes_value_through(self) -> None:
        assert require("x", "name") == "x"

    def test_to_dict_includes_cause(self) -> None:
        err = BaseError("outer", cause=KeyError("k"))
        assert err.to_dict() == {
            "code": "base_error",
            "message": "outer",
            "detail": {},
            "cause": "KeyError('k')",
        }
        assert err.__cause__ is err.cause
        assert str(err) == "outer"
