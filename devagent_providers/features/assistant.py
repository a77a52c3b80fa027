"""CodeAssistant: the editor features expressed as dispatcher queries.

Each method builds a prompt with :mod:`.prompts` and sends it through
``ProviderDispatcher.query``. Following the dispatcher contract, failures are
reported through the dispatcher's notifier and surface here as ``""``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from ..base.logging import get_logger
from ..service.dispatcher import ProviderDispatcher
from . import prompts


class CodeAssistant:
    def __init__(self, dispatcher: ProviderDispatcher) -> None:
        self._dispatcher = dispatcher
        self._logger = get_logger("features.assistant")

    def _ask(self, feature: str, prompt: str) -> str:
        self._logger.debug("feature=%s provider=%s", feature, self._dispatcher.get_current_provider())
        return self._dispatcher.query(prompt)

    def analyze_code(self, code: str, language: str, file_name: str) -> str:
        return self._ask("analyze", prompts.code_analysis_prompt(code, language, file_name))

    def generate_code(self, description: str, language: str) -> str:
        return self._ask("generate", prompts.code_generation_prompt(description, language))

    def refactor_code(self, code: str, language: str, refactor_type: str) -> str:
        return self._ask("refactor", prompts.refactor_prompt(code, language, refactor_type))

    def debug_suggestions(self, code: str, language: str) -> str:
        return self._ask("debug", prompts.debug_suggestions_prompt(code, language))

    def analyze_error(self, code: str, error: str, language: str) -> str:
        return self._ask("error", prompts.error_analysis_prompt(code, error, language))

    def analyze_breakpoint(self, code: str, line: int, language: str) -> str:
        return self._ask("breakpoint", prompts.breakpoint_prompt(code, line, language))

    def generate_project(
        self, project_type: str, name: str, description: Optional[str] = None
    ) -> Tuple[str, Dict[str, str]]:
        """Return the raw structure answer and the file contents parsed from it."""
        answer = self._ask("project", prompts.project_structure_prompt(project_type, name, description))
        return answer, prompts.parse_generated_files(answer)

    def analyze_dependencies(self, dependencies: Iterable[Tuple[str, str]]) -> str:
        return self._ask("dependencies", prompts.dependency_analysis_prompt(dependencies))


__all__ = ["CodeAssistant"]
