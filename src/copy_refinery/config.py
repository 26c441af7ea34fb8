"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from copy_refinery.models.registry import DEFAULT_MODEL_ID, MODEL_REGISTRY


@dataclass(frozen=True)
class LLMConfig:
    default_model: str = DEFAULT_MODEL_ID
    max_tokens: int = 8000
    temperature: float = 0.3
    style_guide_max_tokens: int = 6000
    timeout: float | None = None  # None keeps the SDK transport default

    def __post_init__(self) -> None:
        if self.default_model not in MODEL_REGISTRY:
            raise ValueError(f"llm.default_model is not a known model: {self.default_model}")
        if not 1 <= self.max_tokens <= 64000:
            raise ValueError(f"llm.max_tokens must be in [1, 64000], got {self.max_tokens}")
        if not 1 <= self.style_guide_max_tokens <= 64000:
            raise ValueError(
                "llm.style_guide_max_tokens must be in [1, 64000], "
                f"got {self.style_guide_max_tokens}"
            )
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"llm.temperature must be in [0, 1], got {self.temperature}")
        if self.timeout is not None and self.timeout < 1:
            raise ValueError(f"llm.timeout must be >= 1 second, got {self.timeout}")


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 3000
    index_page: str = "/v2.html"
    static_dir: str | None = None
    cors_origins: tuple[str, ...] = ("*",)

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError(f"server.port must be in [1, 65535], got {self.port}")
        # YAML gives lists; keep the dataclass hashable
        object.__setattr__(self, "cors_origins", tuple(self.cors_origins))


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        server=ServerConfig(**raw.get("server", {})),
    )
