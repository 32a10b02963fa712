"""casetable configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CaseTableSettings(BaseSettings):
    """Runtime settings for comparator runs.

    Loads from environment variables automatically:
        CASETABLE_FORBID_FOCUSED, CASETABLE_WARN_FOCUSED, CASETABLE_MAX_REPR_LENGTH

    Or pass an instance directly as ``settings=`` to any comparator.
    """

    forbid_focused: bool = Field(
        default=False, description="Raise FocusedPairError when a list holds focused pairs (set on CI)"
    )
    warn_focused: bool = Field(
        default=True, description="Emit FocusedPairWarning when focus skips other pairs"
    )
    max_repr_length: int = Field(
        default=120, gt=3, description="Operand reprs in failures are truncated to this length"
    )

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="CASETABLE_",
    )


@lru_cache(maxsize=1)
def get_settings() -> CaseTableSettings:
    """Return the settings loaded from the environment, cached after first use."""
    return CaseTableSettings()
