"""Agent prompt templates. Importing this package registers all of them."""

from agents_hub.prompts.agents import general, review, security, team

__all__ = ["general", "review", "security", "team"]
