# Client for Ollama local inference (completion-style /api/generate).
# Accepts a model name and exposes generate(messages, params).

import logging
import requests
from typing import Callable, List, Tuple, Dict, Any, Optional

from ..errors import ResponseFormatError, UpstreamError
from ..types import Message, ModelParams
from .payload import first_choice, message_content, string_field

logger = logging.getLogger(__name__)

REPLY_FIELDS = ("response", "text", "result")


class OllamaClient:
    provider = "ollama"
    available = True

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "mistral:latest",
        api_key: Optional[str] = None,
        timeout: float = 60,
        post: Optional[Callable[..., requests.Response]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        # each call is a standalone requests.post; nothing carries over between calls
        self._post = post or requests.post

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        model = params.model or self.model
        prompt = self._compose_prompt(messages)
        payload = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": float(params.temperature if params.temperature is not None else 0.0),
                "num_predict": int(params.max_tokens if params.max_tokens is not None else 4096),
            },
        }
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        url = f"{self.base_url}/api/generate"
        logger.debug("Calling Ollama at %s with model %s (%d messages)", url, model, len(messages))
        try:
            resp = self._post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamError(self.provider, None, str(e)) from e
        if not 200 <= resp.status_code < 300:
            raise UpstreamError(self.provider, resp.status_code, resp.text)
        try:
            data = resp.json()
        except ValueError as e:
            raise ResponseFormatError(self.provider, "invalid JSON body") from e
        return self._parse_reply(data), {"engine": "ollama", "model": model}

    def _compose_prompt(self, messages: List[Message]) -> str:
        return "\n\n".join(f"[{m.role.upper()}] {m.content}" for m in messages)

    @staticmethod
    def _parse_reply(data: Any) -> str:
        """Read the reply from whichever field this server flavour uses."""
        if isinstance(data, dict):
            for key in REPLY_FIELDS:
                value = string_field(data, key)
                if value is not None:
                    return value
            choice = first_choice(data)
            if choice is not None:
                for value in (message_content(choice), string_field(choice, "content"), string_field(choice, "text")):
                    if value is not None:
                        return value
        # best effort: hand back the whole payload
        return str(data)
