"""Data models for agentstudio: parameters, messages, decisions, agents, config."""

from agentstudio.models.agent import Agent
from agentstudio.models.config import OracleConfig
from agentstudio.models.decision import Decision, ToolCall
from agentstudio.models.messages import Message, Role
from agentstudio.models.parameters import (
    BooleanParam,
    NumberParam,
    ParameterSchema,
    ParameterSpec,
    ParameterValue,
    StringParam,
    matches_kind,
    parse_parameter,
    parse_parameters,
    schema_to_json,
)

__all__ = [
    "Agent",
    "OracleConfig",
    "Decision",
    "ToolCall",
    "Message",
    "Role",
    "StringParam",
    "NumberParam",
    "BooleanParam",
    "ParameterSpec",
    "ParameterSchema",
    "ParameterValue",
    "matches_kind",
    "parse_parameter",
    "parse_parameters",
    "schema_to_json",
]
