"""Environment-driven configuration for the tracker."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

DB_PATH_ENV = "BOXLAX_DB_PATH"
OLLAMA_HOST_ENV = "BOXLAX_OLLAMA_HOST"
LLM_MODEL_ENV = "BOXLAX_LLM_MODEL"
LLM_FALLBACK_MODELS_ENV = "BOXLAX_LLM_FALLBACK_MODELS"
LLM_DISABLED_ENV = "BOXLAX_LLM_DISABLED"
STUB_LLM_ENV = "BOXLAX_STUB_LLM"

DEFAULT_DB_PATH = Path("data/boxlax-history.sqlite")
DEFAULT_PRIMARY_MODEL = "qwen2.5:7b-instruct-q4_0"
DEFAULT_FALLBACK_MODELS: Tuple[str, ...] = ("mistral:7b-instruct-q4_0",)

_TRUTHY = {"1", "true", "yes", "on"}


def _is_truthy(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() in _TRUTHY


def _split_models(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    db_path: Path = DEFAULT_DB_PATH
    ollama_host: Optional[str] = None
    llm_model: str = DEFAULT_PRIMARY_MODEL
    llm_fallback_models: Tuple[str, ...] = field(default=DEFAULT_FALLBACK_MODELS)
    llm_disabled: bool = False
    stub_llm: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ

    db_path_raw = env.get(DB_PATH_ENV)
    db_path = Path(db_path_raw) if db_path_raw and db_path_raw.strip() else DEFAULT_DB_PATH

    host = env.get(OLLAMA_HOST_ENV)
    host = host.strip() if host and host.strip() else None

    model = env.get(LLM_MODEL_ENV)
    model = model.strip() if model and model.strip() else DEFAULT_PRIMARY_MODEL

    fallback_raw = env.get(LLM_FALLBACK_MODELS_ENV)
    fallbacks = _split_models(fallback_raw) if fallback_raw is not None else DEFAULT_FALLBACK_MODELS

    return Settings(
        db_path=db_path,
        ollama_host=host,
        llm_model=model,
        llm_fallback_models=fallbacks,
        llm_disabled=_is_truthy(env.get(LLM_DISABLED_ENV)),
        stub_llm=_is_truthy(env.get(STUB_LLM_ENV)),
    )
