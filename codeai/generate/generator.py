# ChatGenerator: per-request dispatch between plain chat and the two verse
# tasks. Backend failures (ProviderError) are always recovered locally;
# TaskError subclasses propagate to the API layer.

from __future__ import annotations
import logging
import os
from typing import List, Optional, Tuple

import yaml

from codeai.settings import Settings
from codeai.verses import VerseTask, extract_code, renumber_array, clean_array, normalize_reply, fence
from codeai.verses.prompts import SYSTEM_PROMPTS, CONFIG_KEYS
from .clients import local_reply
from .errors import ProviderError, ResponseFormatError, ExtractionError, FormattingError
from .types import Message, ModelParams

logger = logging.getLogger(__name__)

EXTRACTION_FAILED = "Could not extract Swift code from input"
FAILURE_REASONS = {
    VerseTask.RENUMBER: "Formatting failed",
    VerseTask.CLEAN: "Comment cleaning failed",
}
LOCAL_FORMATTERS = {
    VerseTask.RENUMBER: renumber_array,
    VerseTask.CLEAN: clean_array,
}


class ChatGenerator:
    def __init__(self, model_client, settings: Settings, config_path: Optional[str] = None):
        self.model_client = model_client
        self.settings = settings
        self.config_path = config_path or settings.GENERATOR_CONFIG
        self.cfg = self._load_config()

    def _load_config(self):
        if not self.config_path or not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    # ------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------
    def chat_params(self, model: Optional[str] = None, max_tokens: Optional[int] = None,
                    temperature: Optional[float] = None) -> ModelParams:
        s = self.settings
        return ModelParams(
            model=model or s.DEFAULT_MODEL,
            max_tokens=max_tokens if max_tokens is not None else s.DEFAULT_MAX_TOKENS,
            temperature=temperature if temperature is not None else s.DEFAULT_TEMPERATURE,
        )

    def task_params(self, model: Optional[str] = None, max_tokens: Optional[int] = None,
                    temperature: Optional[float] = None) -> ModelParams:
        s = self.settings
        return ModelParams(
            model=model or s.DEFAULT_SWIFT_MODEL,
            max_tokens=max_tokens if max_tokens is not None else s.DEFAULT_SWIFT_MAX_TOKENS,
            temperature=temperature if temperature is not None else s.DEFAULT_TEMPERATURE,
        )

    def system_prompt(self, task: VerseTask) -> str:
        override = self.cfg.get(CONFIG_KEYS[task])
        return (override or SYSTEM_PROMPTS[task]).strip()

    # ------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------
    def detect_task(self, messages: List[Message]) -> Optional[Tuple[VerseTask, Optional[str]]]:
        """Find a verse command in the last user message.

        Returns (task, code) when a command is present; code is None if no
        Swift array could be found in the last user message nor in all user
        messages joined together.
        """
        user_inputs = [m.content for m in messages if m.role == "user"]
        if not user_inputs:
            return None
        last_user = user_inputs[-1]
        lower = last_user.lower()
        for task in (VerseTask.RENUMBER, VerseTask.CLEAN):
            if any(marker in lower for marker in task.markers):
                code = extract_code(last_user)
                if code is None:
                    code = extract_code("\n".join(user_inputs))
                return task, code
        return None

    def complete(self, messages: List[Message], params: ModelParams) -> str:
        """Main entry point for /v1/chat/completions."""
        detected = self.detect_task(messages)
        if detected is None:
            return self.chat(messages, params)
        task, code = detected
        if code is None:
            raise ExtractionError(EXTRACTION_FAILED)
        return self.run_task(task, code, params)

    def chat(self, messages: List[Message], params: ModelParams) -> str:
        """Reply through the model client; LocalClient answers when no backend is configured."""
        try:
            text, meta = self.model_client.generate(messages, params)
        except ProviderError as e:
            logger.warning("Chat via %s failed, replying locally: %s", e.provider, e)
            return local_reply(messages)
        logger.debug("Chat reply from %s (%d chars)", meta.get("engine"), len(text))
        return text

    # ------------------------------------------------------------
    # Verse tasks
    # ------------------------------------------------------------
    def run_command(self, task: VerseTask, text: str, params: ModelParams) -> str:
        """Extract the array from ``text`` and run ``task`` on it."""
        code = extract_code(text)
        if code is None:
            raise ExtractionError(EXTRACTION_FAILED)
        return self.run_task(task, code, params)

    def run_task(self, task: VerseTask, code: str, params: ModelParams) -> str:
        """Return the rewritten array as a ```swift block.

        The model is tried first when one is configured; any ProviderError
        hands the original code to the local formatter.
        """
        if self.model_client.available:
            try:
                return self._ask_model(task, code, params)
            except ProviderError as e:
                logger.warning("%s via %s failed, using local formatter: %s", task.value, e.provider, e)
        else:
            logger.info("No AI provider configured, using local formatter for %s", task.value)
        return self._format_local(task, code)

    def _ask_model(self, task: VerseTask, code: str, params: ModelParams) -> str:
        messages = [
            Message(role="system", content=self.system_prompt(task)),
            Message(role="user", content=fence(code)),
        ]
        logger.debug("Sending %s to %s with model %s", task.value, self.model_client.provider, params.model)
        text, _meta = self.model_client.generate(messages, params)
        logger.debug("Raw AI reply (first 500 chars): %s", text[:500])
        formatted = normalize_reply(text)
        if formatted is None:
            raise ResponseFormatError(self.model_client.provider, "reply contains no Swift array")
        return formatted

    def _format_local(self, task: VerseTask, code: str) -> str:
        formatted = LOCAL_FORMATTERS[task](code)
        if formatted is None:
            raise FormattingError(FAILURE_REASONS[task])
        return formatted
