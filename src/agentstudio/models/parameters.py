"""Parameter specs for tool schemas.

Defines three parameter kinds as Pydantic models with a discriminated union
(ParameterSpec). Each kind carries a description, a required flag and an
optional default whose runtime type must match the kind. Numbers may also
declare inclusive ``min``/``max`` bounds, which their default must respect.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from agentstudio.exceptions import ParameterDefinitionError

ParameterKind = Literal["string", "number", "boolean"]

# Primitive values a tool call may carry.
ParameterValue = Union[str, int, float, bool]


def matches_kind(kind: str, value: object) -> bool:
    """Return True if ``value``'s runtime type is exactly ``kind``.

    ``bool`` is a subclass of ``int`` in Python, so booleans are excluded
    from the number kind explicitly.
    """
    if kind == "string":
        return isinstance(value, str)
    if kind == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind == "boolean":
        return isinstance(value, bool)
    raise ValueError(f"Unknown parameter kind: {kind!r}")


class _BaseParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = ""
    required: bool = False

    @field_validator("default", mode="before", check_fields=False)
    @classmethod
    def _default_matches_kind(cls, value: object) -> object:
        kind = cls.model_fields["kind"].default
        if value is not None and not matches_kind(kind, value):
            raise ValueError(
                f"default {value!r} is not a {kind} "
                f"(got {type(value).__name__})"
            )
        return value

    def to_json_schema(self) -> dict[str, Any]:
        """Render as a JSON Schema property fragment."""
        schema: dict[str, Any] = {"type": self.kind}  # type: ignore[attr-defined]
        if self.description:
            schema["description"] = self.description
        if self.default is not None:  # type: ignore[attr-defined]
            schema["default"] = self.default  # type: ignore[attr-defined]
        return schema


class StringParam(_BaseParam):
    """A text parameter."""

    kind: Literal["string"] = "string"
    default: str | None = None


class NumberParam(_BaseParam):
    """A numeric parameter with optional inclusive bounds."""

    kind: Literal["number"] = "number"
    default: int | float | None = None
    min: int | float | None = None
    max: int | float | None = None

    @field_validator("min", "max", mode="before")
    @classmethod
    def _bound_is_number(cls, value: object) -> object:
        if value is not None and not matches_kind("number", value):
            raise ValueError(f"bound {value!r} is not a number")
        return value

    @model_validator(mode="after")
    def _bounds_consistent(self) -> NumberParam:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) is greater than max ({self.max})")
        if self.default is not None:
            if self.min is not None and self.default < self.min:
                raise ValueError(f"default ({self.default}) is below min ({self.min})")
            if self.max is not None and self.default > self.max:
                raise ValueError(f"default ({self.default}) is above max ({self.max})")
        return self

    def to_json_schema(self) -> dict[str, Any]:
        schema = super().to_json_schema()
        if self.min is not None:
            schema["minimum"] = self.min
        if self.max is not None:
            schema["maximum"] = self.max
        return schema


class BooleanParam(_BaseParam):
    """A true/false flag."""

    kind: Literal["boolean"] = "boolean"
    default: bool | None = None


ParameterSpec = Annotated[
    Union[StringParam, NumberParam, BooleanParam],
    Field(discriminator="kind"),
]

ParameterSchema = Mapping[str, "StringParam | NumberParam | BooleanParam"]

_spec_adapter = TypeAdapter(ParameterSpec)


def parse_parameter(data: Mapping[str, Any] | BaseModel) -> StringParam | NumberParam | BooleanParam:
    """Validate one parameter spec from a plain dict.

    Already-built specs are returned unchanged.

    Raises:
        ParameterDefinitionError: If the dict is not a valid spec.
    """
    if isinstance(data, (StringParam, NumberParam, BooleanParam)):
        return data
    try:
        return _spec_adapter.validate_python(dict(data))
    except ValidationError as e:
        raise ParameterDefinitionError(f"Invalid parameter spec: {e}") from e


def parse_parameters(
    data: Mapping[str, Mapping[str, Any] | BaseModel],
) -> dict[str, StringParam | NumberParam | BooleanParam]:
    """Validate a whole parameter schema (name -> spec dict).

    Raises:
        ParameterDefinitionError: Naming the first offending parameter.
    """
    schema: dict[str, StringParam | NumberParam | BooleanParam] = {}
    for name, raw in data.items():
        try:
            schema[name] = parse_parameter(raw)
        except ParameterDefinitionError as e:
            raise ParameterDefinitionError(f"Parameter '{name}': {e}") from e
    return schema


def schema_to_json(schema: ParameterSchema) -> dict[str, Any]:
    """Render a parameter schema as a JSON Schema ``object``."""
    return {
        "type": "object",
        "properties": {name: spec.to_json_schema() for name, spec in schema.items()},
        "required": [name for name, spec in schema.items() if spec.required],
    }
