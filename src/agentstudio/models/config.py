"""Configuration models for agentstudio.

OracleConfig selects and parameterizes the decision oracle used by the
CLI and by :func:`agentstudio.oracle.build_oracle`.
"""

from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "AGENTSTUDIO_"


class OracleConfig(BaseModel):
    """Settings for the decision oracle.

    ``provider="keyword"`` is the offline placeholder heuristic; ``"openai"``
    talks to any OpenAI-compatible chat completions endpoint.
    """

    model_config = ConfigDict(frozen=True)

    provider: Literal["keyword", "openai"] = "keyword"
    model: str = "gpt-4o-mini"
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: float = Field(default=120.0, gt=0)
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    delay: float = Field(default=0.0, ge=0)  # keyword oracle latency, seconds

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> OracleConfig:
        """Build a config from ``AGENTSTUDIO_*`` environment variables.

        Keyword overrides that are not None win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for key, var in (
            ("provider", "ORACLE"),
            ("model", "MODEL"),
            ("api_key", "OPENAI_API_KEY"),
            ("base_url", "OPENAI_BASE_URL"),
        ):
            raw = env.get(ENV_PREFIX + var)
            if raw:
                values[key] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
