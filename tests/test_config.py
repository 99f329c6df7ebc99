from pathlib import Path

from boxlax_tracker.config import (
    DEFAULT_DB_PATH,
    DEFAULT_FALLBACK_MODELS,
    DEFAULT_PRIMARY_MODEL,
    load_settings,
)


def test_defaults_without_environment() -> None:
    settings = load_settings({})

    assert settings.db_path == DEFAULT_DB_PATH
    assert settings.ollama_host is None
    assert settings.llm_model == DEFAULT_PRIMARY_MODEL
    assert settings.llm_fallback_models == DEFAULT_FALLBACK_MODELS
    assert settings.llm_disabled is False
    assert settings.stub_llm is False


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "BOXLAX_DB_PATH": "/tmp/games.sqlite",
            "BOXLAX_OLLAMA_HOST": " http://gpu:11434 ",
            "BOXLAX_LLM_MODEL": "llama3",
            "BOXLAX_LLM_FALLBACK_MODELS": "a, b,,",
            "BOXLAX_LLM_DISABLED": "Yes",
            "BOXLAX_STUB_LLM": "0",
        }
    )

    assert settings.db_path == Path("/tmp/games.sqlite")
    assert settings.ollama_host == "http://gpu:11434"
    assert settings.llm_model == "llama3"
    assert settings.llm_fallback_models == ("a", "b")
    assert settings.llm_disabled is True
    assert settings.stub_llm is False


def test_blank_values_fall_back_to_defaults() -> None:
    settings = load_settings({"BOXLAX_DB_PATH": "  ", "BOXLAX_LLM_MODEL": "", "BOXLAX_LLM_FALLBACK_MODELS": ""})

    assert settings.db_path == DEFAULT_DB_PATH
    assert settings.llm_model == DEFAULT_PRIMARY_MODEL
    assert settings.llm_fallback_models == ()
