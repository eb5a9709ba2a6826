"""Configuration schema."""

from pathlib import Path

from pydantic import BaseModel, Field, PrivateAttr


class AgentConfig(BaseModel):
    """Identity of the agent running in this process."""

    name: str = "Hush"
    id: str | None = None  # generated by the runtime when unset


class ModelsConfig(BaseModel):
    """Model names per tier."""

    text_small: str = "gpt-4o-mini"
    text_large: str = "gpt-4o"
    max_tokens: int = 64
    temperature: float = 0.0


class MuteConfig(BaseModel):
    """Settings for the mute-room decision."""

    # Overrides the built-in policy prompt. Must keep the
    # {agent_name} and {recent_messages} fields.
    template: str | None = None
    recent_messages: int = Field(default=20, ge=1)
    # Write the closing "muted" record even when the model said no.
    acknowledge_without_mute: bool = True


class StorageConfig(BaseModel):
    """Where file-backed stores keep their data."""

    data_dir: Path | None = None


class Config(BaseModel):
    """Root configuration for a hushbot agent."""

    agent: AgentConfig = Field(default_factory=AgentConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    mute: MuteConfig = Field(default_factory=MuteConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    _agent_name: str = PrivateAttr(default="default")

    @property
    def agent_name(self) -> str:
        """Name of the config directory this config was loaded for."""
        return self._agent_name
