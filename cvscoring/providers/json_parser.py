import json
from typing import Any

from cvscoring.providers.exceptions import MalformedProviderResponseError


def parse_json_object(raw: str) -> dict[str, Any]:
    """Parse provider output into a JSON object, tolerating markdown code fences.

    Raises:
        MalformedProviderResponseError: if the text is not a JSON object.
    """
    cleaned = (raw or "").strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedProviderResponseError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise MalformedProviderResponseError("JSON response must be an object")
    return parsed
