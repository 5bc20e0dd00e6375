# Helpers for digging a reply string out of decoded backend JSON.

from typing import Any, Dict, Optional


def first_choice(payload: Any) -> Optional[Dict[str, Any]]:
    """Return ``payload["choices"][0]`` when it is a dict, else None."""
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    return first if isinstance(first, dict) else None


def message_content(choice: Dict[str, Any]) -> Optional[str]:
    message = choice.get("message")
    if isinstance(message, dict) and isinstance(message.get("content"), str):
        return message["content"]
    return None


def string_field(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None
