# Turn a flat reply string into a chat.completion object, or into the
# chat.completion.chunk frames of a (single content chunk) SSE stream.

from __future__ import annotations
import json
import time
import uuid
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .types import ChatResponse

DONE_SENTINEL = "data: [DONE]\n\n"


def new_completion_id() -> str:
    return f"chatcmpl-{uuid.uuid4()}"


def count_tokens(content: str) -> int:
    """Number of non-empty pieces of ``content`` split on single spaces.

    This is not a tokenizer count; clients only ever saw this approximation.
    """
    return len([piece for piece in content.split(" ") if piece])


def build_chat_response(content: str, model: str) -> ChatResponse:
    return ChatResponse(
        id=new_completion_id(),
        created=int(time.time()),
        model=model,
        content=content,
        prompt_tokens=0,
        completion_tokens=count_tokens(content),
    )


def _chunk(chunk_id: str, created: int, model: str, delta: Dict[str, Any], finish_reason: Optional[str]) -> Dict[str, Any]:
    return {
        "id": chunk_id,
        "object": "chat.completion.chunk",
        "created": created,
        "model": model,
        "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}],
    }


def stream_frames(content: str, model: str) -> List[Dict[str, Any]]:
    """Role frame, one content frame with the whole reply, finish frame."""
    chunk_id = new_completion_id()
    created = int(time.time())
    return [
        _chunk(chunk_id, created, model, {"role": "assistant", "content": ""}, None),
        _chunk(chunk_id, created, model, {"content": content}, None),
        _chunk(chunk_id, created, model, {}, "stop"),
    ]


def encode_sse(frames: Iterable[Dict[str, Any]]) -> Iterator[str]:
    for frame in frames:
        yield f"data: {json.dumps(frame)}\n\n"
    yield DONE_SENTINEL
