"""Tests for the Step base classes."""

import pytest

from schemagraph.commands.graph.steps.base import (
    ConfigurationError,
    MechanicalStep,
    SchemaIntegrityError,
    StepValidationError,
)


class TestMechanicalStep:
    def test_simple_execution(self):
        class DoubleStep(MechanicalStep[int, int]):
            name = "double"

            def _execute(self, input: int) -> int:
                return input * 2

        assert DoubleStep().run(5) == 10

    def test_validation_failure_raises(self):
        class PositiveOnly(MechanicalStep[int, int]):
            name = "positive"

            def _execute(self, input: int) -> int:
                return input

            def _validate_output(self, output: int) -> None:
                if output < 0:
                    raise StepValidationError("Must be positive", {"value": output})

        step = PositiveOnly()
        assert step.run(5) == 5

        with pytest.raises(StepValidationError, match="Must be positive") as exc_info:
            step.run(-1)
        assert exc_info.value.details == {"value": -1}

    def test_no_retry_on_failure(self):
        """A failed output check stops the step."""
        call_count = [0]

        class FailStep(MechanicalStep[int, int]):
            name = "fail"

            def _execute(self, input: int) -> int:
                call_count[0] += 1
                return -1

            def _validate_output(self, output: int) -> None:
                raise StepValidationError("always fails")

        with pytest.raises(StepValidationError):
            FailStep().run(1)
        assert call_count[0] == 1


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(SchemaIntegrityError, StepValidationError)
        assert issubclass(ConfigurationError, StepValidationError)

    def test_details_default_empty(self):
        assert SchemaIntegrityError("boom").details == {}
