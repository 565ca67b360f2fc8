from agents_hub.prompts.registry import PromptRegistry, PromptVersion, register_prompt

# Register agent prompts on import
from agents_hub.prompts import agents  # noqa: F401

__all__ = ["PromptRegistry", "PromptVersion", "register_prompt"]
