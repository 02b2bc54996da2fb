"""Unit tests for the error hierarchy."""

import logging

import pytest

from maybe_monad import lift_maybe, nothing
from maybe_monad.utils.error_manager import (
    ArityError,
    CompositionError,
    ContractViolationError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    MaybeError,
    SignatureMismatchError,
)


class TestHierarchy:
    """Tests for how errors fit into the builtin exception tree."""

    def test_contract_violation(self):
        error = ContractViolationError("broken")
        assert isinstance(error, MaybeError)
        assert isinstance(error, AssertionError)
        assert error.severity is ErrorSeverity.CRITICAL
        assert error.code is ErrorCode.CONTRACT_GET_ON_NOTHING

    def test_composition_errors_are_type_errors(self):
        for error_class in (ArityError, SignatureMismatchError):
            error = error_class("bad")
            assert isinstance(error, CompositionError)
            assert isinstance(error, TypeError)
            assert error.severity is ErrorSeverity.ERROR

    def test_message_carries_code(self):
        assert str(ArityError("wrong")) == "COMPOSITION_ARITY: wrong"

    def test_code_category(self):
        assert ErrorCode.COMPOSITION_ARITY.category is ErrorCategory.COMPOSITION
        assert ErrorCode.CONTRACT_GET_ON_NOTHING.category is ErrorCategory.CONTRACT
        assert ErrorCode.UNKNOWN_ERROR.category is ErrorCategory.UNKNOWN


class TestContext:
    """Tests for call-site capture."""

    def test_context_points_at_caller(self):
        with pytest.raises(ArityError) as exc_info:
            lift_maybe(lambda a, b: a)

        context = exc_info.value.context
        assert context.function == "test_context_points_at_caller"
        assert context.file_path.endswith("test_error_manager.py")
        assert context.line_number > 0

    def test_to_dict(self):
        with pytest.raises(ContractViolationError) as exc_info:
            nothing().unsafe_get_just()

        data = exc_info.value.to_dict()
        assert data["code"] == "CONTRACT_GET_ON_NOTHING"
        assert data["category"] == "CONTRACT"
        assert data["severity"] == "CRITICAL"
        assert data["context"]["function"] == "test_to_dict"

    def test_additional_info(self):
        error = SignatureMismatchError("clash", first="f", second="g")
        assert error.additional_info == {"first": "f", "second": "g"}
        assert error.to_dict()["additional_info"] == {"first": "'f'", "second": "'g'"}


class TestLogging:
    """Tests for errors logging themselves."""

    def test_logged_at_severity(self, caplog):
        with caplog.at_level(logging.ERROR, logger="maybe_monad.errors"):
            ArityError("too many arguments", function="pair")

        records = [r for r in caplog.records if r.name == "maybe_monad.errors"]
        assert records[-1].levelno == logging.ERROR
        assert "COMPOSITION_ARITY" in records[-1].getMessage()
        assert "function: pair" in records[-1].getMessage()
