# Model client used when no backend is configured.
# Also provides the reply plain chat falls back to when a backend call fails.

from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams

GREETING = "Hello, provide a prompt or some code and I'll respond."


def local_reply(messages: List[Message]) -> str:
    user_inputs = [m.content for m in messages if m.role == "user"]
    if not user_inputs:
        return GREETING
    last_user = user_inputs[-1]
    if "remove blank" in last_user.lower():
        return "\n".join(line for line in last_user.splitlines() if line.strip())
    return f"Assistant (local fallback):\n\n{last_user}"


class LocalClient:
    provider = "local"
    available = False

    def __init__(self, model: str = "local-fallback"):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        meta = {"engine": "local", "model": self.model}
        return local_reply(messages), meta
