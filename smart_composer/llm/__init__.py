from smart_composer.llm.base import BaseLLMProvider
from smart_composer.llm.exceptions import UnknownProviderError, UnsupportedOperationError
from smart_composer.llm.footnotes import generate_footnote_markdown
from smart_composer.llm.sieke import SiekeLLMProvider, messages_to_contents

__all__ = [
    "BaseLLMProvider",
    "SiekeLLMProvider",
    "UnknownProviderError",
    "UnsupportedOperationError",
    "generate_footnote_markdown",
    "messages_to_contents",
]
