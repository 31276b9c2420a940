"""Base classes for graph pipeline steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

In = TypeVar("In")
Out = TypeVar("Out")


class StepValidationError(Exception):
    """Raised when a step's input or output fails validation."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


class SchemaIntegrityError(StepValidationError):
    """Raised when the schema references a type name it does not define."""


class ConfigurationError(StepValidationError):
    """Raised when a hide rule cannot be applied to the schema."""


class Step(ABC, Generic[In, Out]):
    """Base class for a typed pipeline step.

    Each step transforms an input of type In to an output of type Out.
    """

    name: str = "step"

    @abstractmethod
    def run(self, input: In) -> Out:
        """Execute the step and return the result."""
        ...

    def _validate_output(self, output: Out) -> None:
        """Validate the step output. Raises StepValidationError on failure.

        Override in subclasses to add validation logic. Default is no-op.
        """
        pass


class MechanicalStep(Step[In, Out]):
    """A step that runs a pure in-memory transformation.

    The output is validated before it is returned, and the first
    StepValidationError stops the pipeline.
    """

    @abstractmethod
    def _execute(self, input: In) -> Out:
        """Implement the transformation."""
        ...

    def run(self, input: In) -> Out:
        output = self._execute(input)
        self._validate_output(output)
        return output
