"""
Centralized prompt registry for hub agents.

Templates are plain ``str.format`` strings; literal braces in JSON
examples are doubled. Agent modules register their prompts with the
``register_prompt`` decorator at import time.
"""

import logging
import string
from typing import Callable, Dict, FrozenSet, Optional
from dataclasses import dataclass, field
from datetime import datetime

logger = logging.getLogger(__name__)


def _placeholders(template: str) -> FrozenSet[str]:
    """Top-level ``{name}`` fields of a format string."""
    names = set()
    for _, field_name, _, _ in string.Formatter().parse(template):
        if field_name:
            names.add(field_name.split(".", 1)[0].split("[", 1)[0])
    return frozenset(names)


def _version_key(version: str):
    return tuple(int(part) if part.isdigit() else part for part in version.split("."))


@dataclass
class PromptVersion:
    """A versioned prompt template."""
    name: str
    version: str
    template: str
    created_at: datetime
    description: str
    placeholders: FrozenSet[str] = field(default=frozenset())

    def __post_init__(self):
        if not self.placeholders:
            self.placeholders = _placeholders(self.template)

    def render(self, context: Dict) -> str:
        """
        Raises:
            KeyError: A placeholder has no value in context
        """
        missing = sorted(self.placeholders - context.keys())
        if missing:
            raise KeyError(
                f"Prompt '{self.name}' v{self.version} missing context: {', '.join(missing)}"
            )
        return self.template.format(**context)


class PromptRegistry:
    """
    Central registry for all LLM prompts.

    Usage:
        registry = PromptRegistry.get_instance()
        prompt = registry.get("agents.recon", context={"scan_results": "..."})
    """

    _instance: Optional['PromptRegistry'] = None
    _prompts: Dict[str, Dict[str, PromptVersion]] = {}

    @classmethod
    def get_instance(cls) -> 'PromptRegistry':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, prompt_version: PromptVersion) -> None:
        """Register a prompt version. Re-registering a version replaces it."""
        versions = self._prompts.setdefault(prompt_version.name, {})
        if prompt_version.version in versions:
            logger.warning(
                "prompt_replaced: name=%s version=%s",
                prompt_version.name,
                prompt_version.version,
            )
        versions[prompt_version.version] = prompt_version

        logger.debug(
            "prompt_registered: name=%s version=%s placeholders=%s",
            prompt_version.name,
            prompt_version.version,
            sorted(prompt_version.placeholders),
        )

    def has(self, name: str) -> bool:
        return name in self._prompts

    def resolve(self, name: str, version: str = "latest") -> PromptVersion:
        """
        Look up a prompt version without rendering it.

        Raises:
            ValueError: Unknown prompt or version
        """
        if name not in self._prompts:
            raise ValueError(f"Prompt '{name}' not registered")

        versions = self._prompts[name]

        if version == "latest":
            version = max(versions.keys(), key=_version_key)

        if version not in versions:
            raise ValueError(f"Version '{version}' not found for prompt '{name}'")

        return versions[version]

    def get(
        self,
        name: str,
        version: str = "latest",
        context: Optional[Dict] = None
    ) -> str:
        """
        Get a prompt by name and version.

        Args:
            name: Prompt name (e.g., "agents.recon")
            version: Version string or "latest"
            context: Variables to interpolate into template. Without it the
                raw template is returned.

        Returns:
            Rendered prompt string

        Raises:
            ValueError: Unknown prompt or version
            KeyError: Template variable missing from context
        """
        prompt_version = self.resolve(name, version)

        logger.debug(
            "prompt_retrieved: name=%s version=%s has_context=%s",
            name,
            prompt_version.version,
            context is not None,
        )

        if context:
            return prompt_version.render(context)
        return prompt_version.template

    def list_prompts(self) -> Dict[str, list]:
        """List all registered prompts and their versions."""
        return {
            name: sorted(versions.keys(), key=_version_key)
            for name, versions in self._prompts.items()
        }


def register_prompt(name: str, version: str, description: str):
    """Decorator to register a prompt."""
    def decorator(func: Callable[[], str]) -> Callable[[], str]:
        PromptRegistry.get_instance().register(
            PromptVersion(
                name=name,
                version=version,
                template=func(),
                created_at=datetime.now(),
                description=description,
            )
        )
        return func
    return decorator
