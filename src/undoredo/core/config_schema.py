"""Pydantic schema for undoredo configuration validation.

Mirrors the YAML structure in config/default.yaml. Used when
``validate=True`` is passed to ``UndoRedoConfig.load()``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SystemConfig(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    validate_config: bool = False
    log_file: str | None = None
    log_json: bool = False


class HistorySettings(BaseModel):
    capacity: int = Field(default=100, ge=0)
    notify_on_clear: bool = False


class UndoRedoRootConfig(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    history: HistorySettings = Field(default_factory=HistorySettings)

    model_config = {"extra": "allow"}


class UndoRedoConfigSchema(BaseModel):
    """Top-level wrapper matching YAML root key ``undoredo:``."""

    undoredo: UndoRedoRootConfig

    model_config = {"extra": "allow"}


def validate_config(cfg_dict: dict) -> UndoRedoConfigSchema:
    """Validate a raw config dict (e.g. from OmegaConf) against the schema.

    Raises ``pydantic.ValidationError`` on invalid config.
    """
    return UndoRedoConfigSchema.model_validate(cfg_dict)
