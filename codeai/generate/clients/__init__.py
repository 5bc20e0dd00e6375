# Model client selection: one client per process, picked from settings.

from codeai.settings import Dialect, Settings

from .local_client import LocalClient, local_reply


def build_model_client(settings: Settings):
    """Return the client for the configured provider, or LocalClient."""
    if not settings.is_configured:
        return LocalClient()

    if settings.dialect is Dialect.COMPLETION:
        from .ollama_client import OllamaClient
        return OllamaClient(
            base_url=settings.api_base_url,
            model=settings.DEFAULT_MODEL,
            api_key=settings.api_key,
            timeout=settings.REQUEST_TIMEOUT,
        )

    from .openai_client import OpenAIClient
    return OpenAIClient(
        api_key=settings.api_key,
        base_url=settings.api_base_url,
        provider=settings.provider,
        model=settings.DEFAULT_MODEL,
        timeout=settings.REQUEST_TIMEOUT,
    )


__all__ = ["build_model_client", "LocalClient", "local_reply"]
