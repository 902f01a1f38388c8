from __future__ import annotations

from typing import Any

from smart_composer.llm.base import BaseLLMProvider
from smart_composer.llm.exceptions import UnknownProviderError
from smart_composer.models import ChatModel, LLMProvider


class _Registry[T]:
    """Lazily-populated factory registry.

    Each adapter module registers itself via :meth:`register`.
    :meth:`build` resolves a provider type to a factory and calls
    ``factory(provider, **kwargs)``.
    """

    def __init__(self, label: str) -> None:
        self._label = label
        self._factories: dict[str, type[T]] = {}
        self._defaults_loaded = False

    def register(self, name: str, cls: type[T]) -> None:
        self._factories[name] = cls

    def names(self) -> list[str]:
        self._ensure_defaults()
        return list(self._factories)

    def build(self, name: str, provider: LLMProvider, **kwargs: Any) -> T:
        self._ensure_defaults()
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownProviderError(
                f"Unknown {self._label} provider '{name}'. "
                f"Available: {list(self._factories)}"
            )
        return factory(provider, **kwargs)  # type: ignore[call-arg]

    def _ensure_defaults(self) -> None:
        if not self._defaults_loaded:
            self._load_defaults()
            self._defaults_loaded = True

    def _load_defaults(self) -> None:
        """Override point: subclasses populate built-in factories here."""


class _LLMRegistry(_Registry[BaseLLMProvider]):
    def _load_defaults(self) -> None:
        from smart_composer.llm.sieke import SiekeLLMProvider

        self.register("sieke", SiekeLLMProvider)


# Singleton instance
llm_registry = _LLMRegistry("llm")


def build_provider(provider: LLMProvider, **kwargs: Any) -> BaseLLMProvider:
    """Build the chat adapter for a persisted provider record."""
    return llm_registry.build(provider.type.value, provider, **kwargs)


def resolve_chat_model(
    settings: dict[str, Any],
    model_id: str | None = None,
) -> tuple[LLMProvider, ChatModel]:
    """Look up a chat model and its provider in persisted settings.

    Uses ``settings["chatModelId"]`` when *model_id* is not given.
    """
    model_id = model_id or settings.get("chatModelId")
    models = [ChatModel.model_validate(m) for m in settings.get("chatModels", [])]
    model = next((m for m in models if m.id == model_id), None)
    if model is None:
        raise ValueError(
            f"Unknown chat model '{model_id}'. Available: {[m.id for m in models]}"
        )

    providers = [
        LLMProvider.model_validate(p) for p in settings.get("providers", [])
    ]
    provider = next((p for p in providers if p.id == model.provider_id), None)
    if provider is None:
        raise ValueError(
            f"Chat model '{model.id}' references missing provider '{model.provider_id}'"
        )
    return provider, model
