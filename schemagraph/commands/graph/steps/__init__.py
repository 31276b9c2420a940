"""Pipeline steps for the schema graph builder."""

from __future__ import annotations

from schemagraph.commands.graph.steps.base import (
    ConfigurationError as ConfigurationError,
    SchemaIntegrityError as SchemaIntegrityError,
    Step as Step,
    StepValidationError as StepValidationError,
)

__all__ = [
    "ConfigurationError",
    "SchemaIntegrityError",
    "Step",
    "StepValidationError",
]
