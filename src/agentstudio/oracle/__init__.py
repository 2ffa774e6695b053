"""Decision oracles for agentstudio.

Provides the DecisionOracle protocol, an offline keyword oracle, an
OpenAI-compatible HTTP oracle, and a factory that picks one from config.
"""

from __future__ import annotations

from agentstudio.models.config import OracleConfig
from agentstudio.oracle.errors import (
    OracleAuthError,
    OracleConfigError,
    OracleError,
    OracleRateLimitError,
    OracleResponseError,
    OracleStatusError,
    OracleTransportError,
)
from agentstudio.oracle.keyword import KeywordOracle
from agentstudio.oracle.openai import OpenAIOracle
from agentstudio.oracle.protocols import DecisionOracle


def build_oracle(config: OracleConfig | None = None) -> DecisionOracle:
    """Create the oracle selected by ``config`` (defaults from the environment).

    Raises:
        OracleConfigError: If the openai provider is selected without an API key.
    """
    config = config or OracleConfig.from_env()
    if config.provider == "openai":
        return OpenAIOracle.from_config(config)
    return KeywordOracle(delay=config.delay)


__all__ = [
    "DecisionOracle",
    "KeywordOracle",
    "OpenAIOracle",
    "build_oracle",
    "OracleError",
    "OracleConfigError",
    "OracleAuthError",
    "OracleRateLimitError",
    "OracleStatusError",
    "OracleTransportError",
    "OracleResponseError",
]
