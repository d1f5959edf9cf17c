"""Validator settings — init kwargs and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the host application
  2. Env vars     — ``TAGVAL_*`` prefix
  3. Code defaults

No config file is read.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings

from tagval.domain.fields import DEFAULT_PRIVATE_PREFIX, DEFAULT_TAG_KEY


class ValidatorSettings(BaseSettings):
    """Settings shared by every :class:`~tagval.services.validator.Validator`.

    Attributes:
        tag_key: Metadata key holding a field's rule annotation.
        private_prefix: Field-name prefix marking a field as private.
        verbose: Enable DEBUG-level ``tagval`` logging.
        log_json: Render log lines as JSON instead of console text.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TAGVAL_",
    }

    tag_key: str = DEFAULT_TAG_KEY
    private_prefix: str = DEFAULT_PRIVATE_PREFIX
    verbose: bool = False
    log_json: bool = False

    @field_validator("tag_key")
    @classmethod
    def _tag_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "tag_key must not be empty"
            raise ValueError(msg)
        return value
