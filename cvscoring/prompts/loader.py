from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent

ANALYSIS_PROMPT = "analysis_prompt.txt"
COMPATIBILITY_PROMPT = "compatibility_prompt.txt"


class PromptLoadError(Exception):
    """Raised when a prompt template cannot be read."""


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template by file name.

    Args:
        name: File name of a bundled template, e.g. ``analysis_prompt.txt``.
        path: Optional explicit path overriding the bundled template.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template {path}: {exc}") from exc
