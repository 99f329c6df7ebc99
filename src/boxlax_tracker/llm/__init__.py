"""Coach report generation via a locally served language model."""

from boxlax_tracker.llm.client import OllamaConfig, OllamaLLM
from boxlax_tracker.llm.models import ShotProjection, project_shots
from boxlax_tracker.llm.summary import CoachReportGenerator, create_llm_client

__all__ = [
    "OllamaConfig",
    "OllamaLLM",
    "ShotProjection",
    "project_shots",
    "CoachReportGenerator",
    "create_llm_client",
]
