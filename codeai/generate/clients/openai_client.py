# Client for OpenAI-compatible Chat Completions APIs (OpenAI, Mistral).
# Same interface as OllamaClient: generate(messages, params) -> (text, meta).

import logging
from typing import List, Tuple, Dict, Any, Optional

from openai import OpenAI, APIConnectionError, APIError, APIResponseValidationError, APIStatusError

from ..errors import ResponseFormatError, UpstreamError
from ..types import Message, ModelParams
from .payload import first_choice, message_content, string_field

logger = logging.getLogger(__name__)


class OpenAIClient:
    available = True

    def __init__(
        self,
        api_key: str,
        base_url: str,
        provider: str = "openai",
        model: str = "gpt-4o-mini",
        timeout: float = 60,
        client: Optional[Any] = None,
    ):
        self.provider = provider
        self.model = model
        self.base_url = base_url
        # no retries: a failed call falls back locally instead
        self.client = client or OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        model = params.model or self.model
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        logger.debug("Calling %s (OpenAI-compatible) at %s with model %s", self.provider, self.base_url, model)
        try:
            resp = self.client.chat.completions.create(
                model=model,
                messages=formatted,
                temperature=params.temperature if params.temperature is not None else 0.0,
                max_tokens=params.max_tokens if params.max_tokens is not None else 4096,
            )
        except APIStatusError as e:
            raise UpstreamError(self.provider, e.status_code, e.response.text) from e
        except APIConnectionError as e:
            raise UpstreamError(self.provider, None, str(e)) from e
        except APIResponseValidationError as e:
            raise ResponseFormatError(self.provider, str(e)) from e
        except APIError as e:
            raise UpstreamError(self.provider, None, str(e)) from e

        payload = resp.model_dump() if hasattr(resp, "model_dump") else resp
        text = self._parse_reply(payload)
        if text is None:
            raise ResponseFormatError(self.provider, "no choices[0].message.content or choices[0].text")
        meta = {"engine": self.provider, "model": model}
        return text, meta

    @staticmethod
    def _parse_reply(payload: Any) -> Optional[str]:
        choice = first_choice(payload)
        if choice is None:
            return None
        content = message_content(choice)
        if content is not None:
            return content
        return string_field(choice, "text")
