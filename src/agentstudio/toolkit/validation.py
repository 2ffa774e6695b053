"""Parameter validation for tool calls.

Checks a supplied parameter bag against a tool's parameter schema before
the tool is invoked. Rules run in schema declaration order and the first
violation wins; errors are not aggregated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from agentstudio.models.parameters import NumberParam, ParameterSchema, matches_kind


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating one parameter bag.

    Attributes:
        passed: Whether every declared parameter was acceptable.
        error: Description of the first violated rule, or None if passed.
    """

    passed: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.passed

    def __str__(self) -> str:
        return "passed" if self.passed else (self.error or "failed")


_PASSED = ValidationResult(passed=True)


def _fail(error: str) -> ValidationResult:
    return ValidationResult(passed=False, error=error)


def validate_parameters(
    schema: ParameterSchema,
    supplied: Mapping[str, object],
) -> ValidationResult:
    """Validate ``supplied`` against ``schema``.

    Supplied keys that the schema does not declare are ignored. Only a
    missing key counts as absent; None is a value of no kind. Defaults are
    not consulted here (they are bounds-checked when the spec is built).

    Args:
        schema: Parameter name -> spec, in declaration order.
        supplied: Parameter bag from a tool call.

    Returns:
        ValidationResult; ``error`` names the offending parameter on failure.
    """
    for name, spec in schema.items():
        if name not in supplied:
            if spec.required:
                return _fail(f"Missing required parameter: {name}")
            continue

        # An explicit None is present, so it fails the kind check.
        value = supplied[name]
        if not matches_kind(spec.kind, value):
            return _fail(f"Parameter {name} must be a {spec.kind}")

        if isinstance(spec, NumberParam):
            if spec.min is not None and value < spec.min:
                return _fail(f"Parameter {name} must be >= {spec.min}")
            if spec.max is not None and value > spec.max:
                return _fail(f"Parameter {name} must be <= {spec.max}")

    return _PASSED
