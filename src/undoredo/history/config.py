"""History buffer configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from omegaconf import DictConfig, OmegaConf

logger = logging.getLogger(__name__)


@dataclass
class HistoryConfig:
    """Undo/redo history configuration."""

    capacity: int = 100  # 0 = unbounded
    notify_on_clear: bool = False

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> HistoryConfig:
        """Build from OmegaConf dict or plain dict."""
        if cfg is None:
            return cls()

        if isinstance(cfg, DictConfig):
            cfg = OmegaConf.to_container(cfg, resolve=True)

        if not isinstance(cfg, dict):
            cfg = dict(cfg)

        return cls(
            capacity=int(cfg.get("capacity", 100)),
            notify_on_clear=bool(cfg.get("notify_on_clear", False)),
        )
