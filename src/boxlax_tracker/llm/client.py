"""HTTP client for a local Ollama server used to write coach reports."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple
from urllib import error, request
from urllib.parse import urljoin

from boxlax_tracker.config import Settings

DEFAULT_HOST = "http://localhost:11434"
DEFAULT_TIMEOUT_SECONDS = 60.0


@dataclass
class OllamaConfig:
    """Model preference order and connection details for Ollama."""

    primary_model: str
    fallback_models: Sequence[str] = field(default_factory=tuple)
    host: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    default_options: Dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings) -> "OllamaConfig":
        return cls(
            primary_model=settings.llm_model,
            fallback_models=settings.llm_fallback_models,
            host=settings.ollama_host,
        )


class OllamaLLM:
    """Send prompts to Ollama, falling back through the configured models."""

    def __init__(self, config: OllamaConfig):
        self._config = config
        self._models: Tuple[str, ...] = (config.primary_model, *config.fallback_models)
        base_host = config.host or DEFAULT_HOST
        self._endpoint = urljoin(base_host if base_host.endswith("/") else f"{base_host}/", "api/generate")

    @property
    def models(self) -> Sequence[str]:
        return self._models

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def generate(
        self,
        prompt: str,
        *,
        model: Optional[str] = None,
        options: Optional[Dict[str, object]] = None,
    ) -> Tuple[str, str]:
        """Return ``(text, model_used)`` from the first model that answers."""

        models_to_try: Iterable[str] = (model,) if model else self._models
        last_error: Optional[Exception] = None
        for model_name in models_to_try:
            try:
                return self._generate_once(model_name, prompt, options or {})
            except RuntimeError as exc:
                last_error = exc

        raise RuntimeError("All configured Ollama models failed to respond") from last_error

    def _generate_once(self, model_name: str, prompt: str, options: Dict[str, object]) -> Tuple[str, str]:
        payload = {
            "model": model_name,
            "prompt": prompt,
            "options": {**self._config.default_options, **options},
            "stream": False,
        }
        req = request.Request(
            self._endpoint,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with request.urlopen(req, timeout=self._config.timeout) as resp:
                response = json.loads(resp.read().decode("utf-8"))
        except error.HTTPError as exc:  # pragma: no cover - network/ollama errors
            raise RuntimeError(f"Ollama returned HTTP {exc.code}: {exc.reason}") from exc
        except (error.URLError, TimeoutError) as exc:  # pragma: no cover - network/ollama errors
            raise RuntimeError("Unable to reach Ollama server") from exc
        except OSError as exc:
            raise RuntimeError(f"Connection to Ollama failed while reading the reply: {exc}") from exc
        except json.JSONDecodeError as exc:  # pragma: no cover - malformed server reply
            raise RuntimeError("Ollama returned a non-JSON response") from exc

        if response.get("error"):
            raise RuntimeError(str(response["error"]))

        return response.get("response", ""), response.get("model", model_name)
