from .base import BackendAdapter
from .openai_chat import OpenAIChatAdapter

__all__ = ["BackendAdapter", "OpenAIChatAdapter"]
