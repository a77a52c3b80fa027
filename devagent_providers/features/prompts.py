"""Prompt builders for the editor-facing features.

Each builder returns a plain prompt string ready for
:meth:`ProviderDispatcher.query`. Builders are pure (no I/O) so hosts can show
or log the exact text sent to a model.

Also contains :func:`parse_generated_files`, which splits a project-structure
answer into ``{path: content}`` without touching the file system.
"""

from __future__ import annotations

import textwrap
from typing import Dict, Iterable, Optional, Tuple

REFACTOR_TYPES: Tuple[str, ...] = (
    "Improve readability",
    "Optimize performance",
    "Add comments",
    "Convert to modern syntax",
)

_MARKDOWN = "Format your response in Markdown."


def _render(template: str, **values: object) -> str:
    return textwrap.dedent(template).format(**values).strip() + "\n"


def code_analysis_prompt(code: str, language: str, file_name: str) -> str:
    return _render(
        """
        Analyze the following {language} code from file {file_name}:

        {code}

        Provide a detailed analysis including:
        1. Code structure and organization
        2. Potential bugs or errors
        3. Performance considerations
        4. Best practices and adherence to coding standards
        5. Suggestions for improvement

        {markdown}
        """,
        language=language,
        file_name=file_name,
        code=code,
        markdown=_MARKDOWN,
    )


def code_generation_prompt(description: str, language: str) -> str:
    return _render(
        """
        Generate {language} code for the following specification:

        {description}

        Provide only the code without any additional explanation.
        """,
        language=language,
        description=description,
    )


def refactor_prompt(code: str, language: str, refactor_type: str) -> str:
    """Ask for ``code`` rewritten according to ``refactor_type`` (see ``REFACTOR_TYPES``)."""
    return _render(
        """
        Refactor the following {language} code to {refactor_type}:

        {code}

        Provide only the refactored code without any additional explanation.
        """,
        language=language,
        refactor_type=refactor_type.lower(),
        code=code,
    )


def debug_suggestions_prompt(code: str, language: str) -> str:
    return _render(
        """
        Analyze the following {language} code for potential bugs and provide debugging suggestions:

        {code}

        Please provide:
        1. Potential logical errors or bugs
        2. Suggestions for adding strategic debug logging
        3. Recommendations for error handling improvements
        4. Any performance considerations

        {markdown}
        """,
        language=language,
        code=code,
        markdown=_MARKDOWN,
    )


def error_analysis_prompt(code: str, error: str, language: str) -> str:
    return _render(
        """
        Analyze the following {language} code and the error message:

        Code:
        {code}

        Error:
        {error}

        Please provide:
        1. An explanation of what might be causing the error
        2. Suggestions for fixing the error
        3. Any additional context or considerations

        {markdown}
        """,
        language=language,
        code=code,
        error=error,
        markdown=_MARKDOWN,
    )


def breakpoint_prompt(code: str, line: int, language: str) -> str:
    """Build a prompt about a breakpoint on zero-based ``line``.

    Editors count lines from zero; the prompt shows the one-based number.
    """
    return _render(
        """
        Analyze the following {language} code, focusing on line {line}:

        {code}

        A breakpoint has been set on line {line}. Please provide:
        1. An analysis of what the code is doing at this point
        2. Potential issues that might occur at or before this line
        3. Suggestions for improving or fixing the code around this breakpoint
        4. Recommendations for what to check when the breakpoint is hit during debugging

        {markdown}
        """,
        language=language,
        line=line + 1,
        code=code,
        markdown=_MARKDOWN,
    )


def project_structure_prompt(project_type: str, name: str, description: Optional[str] = None) -> str:
    described = f'The project description is: "{description}"' if description else ""
    return _render(
        """
        Generate a project structure for a {project_type} project named "{name}".
        {described}

        Provide the project structure in the following format:
        - folder_name/
          - file_name.ext
          - subfolder_name/
            - file_name.ext

        Include common files and folders for a {project_type} project, such as configuration files,
        source code directories, and test directories. Also, provide the content for key files like
        package.json, README.md, and the main application file.

        For each file, provide the content in the following format:
        --- filename.ext ---
        [File content here]
        --- End of filename.ext ---
        """,
        project_type=project_type,
        name=name,
        described=described,
    )


def dependency_analysis_prompt(dependencies: Iterable[Tuple[str, str]]) -> str:
    listing = "\n".join(f"{name}: {version}" for name, version in dependencies)
    return _render(
        """
        Analyze the following dependencies for a project:

        {listing}

        Provide a brief analysis including:
        1. Any potential security vulnerabilities
        2. Suggestions for updating outdated packages
        3. Identification of unused or redundant dependencies
        4. Recommendations for alternative packages if applicable

        {markdown}
        """,
        listing=listing,
        markdown=_MARKDOWN,
    )


def parse_generated_files(answer: str) -> Dict[str, str]:
    """Extract ``--- name ---`` ... ``--- End of name ---`` blocks.

    A block left open at the end of the answer is kept. Content is stripped of
    surrounding blank lines.
    """
    files: Dict[str, str] = {}
    current: Optional[str] = None
    body: list[str] = []
    for raw in answer.splitlines():
        line = raw.strip()
        if current is not None and line == f"--- End of {current} ---":
            files[current] = "\n".join(body).strip()
            current, body = None, []
        elif line.startswith("--- ") and line.endswith(" ---") and len(line) > 8:
            if current is not None:
                files[current] = "\n".join(body).strip()
            current, body = line[4:-4].strip(), []
        elif current is not None:
            body.append(raw)
    if current is not None:
        files[current] = "\n".join(body).strip()
    return files


__all__ = [
    "REFACTOR_TYPES",
    "code_analysis_prompt",
    "code_generation_prompt",
    "refactor_prompt",
    "debug_suggestions_prompt",
    "error_analysis_prompt",
    "breakpoint_prompt",
    "project_structure_prompt",
    "dependency_analysis_prompt",
    "parse_generated_files",
]
