"""
AI Agents Hub - Gradio Application

Chat with a team of LLM-backed agents by mentioning them:

    @recon <Nmap output>
    @critic <code>  Focus: SQL injection
    @education <content>  Learning Goal: <goal>  Audience: <audience>

Messages without a mention go to the Technical Director (@director).

Features:
- Mention routing over a fixed agent registry
- One pending agent call per browser tab (input is disabled while waiting)
- Per-tab session isolation (each tab owns its own transcript)
- LLM settings panel with a connection check

Supports Ollama and other OpenAI-compatible endpoints.

Usage:
    # With Ollama (default)
    python gradio_app.py

    # With OpenAI
    HUB_LLM_API_KEY=sk-xxx HUB_LLM_BASE_URL=https://api.openai.com/v1 HUB_LLM_MODEL=gpt-4o-mini python gradio_app.py

Open browser: http://localhost:8001
"""
from typing import Optional

import gradio as gr
import structlog
from dotenv import load_dotenv

load_dotenv()

from agents_hub._logging import configure_logging
from agents_hub.config import HubSettings
from agents_hub.errors import HubBusyError
from agents_hub.llm import HttpHealthProbe
from agents_hub.orchestration import AgentRegistry, AgentsHub, HubEventType
from agents_hub.rendering import to_chat_messages
from agents_hub.wiring import (
    create_agent_registry,
    create_endpoint,
    create_hub,
    create_llm_client,
)

_settings = HubSettings.from_env()
configure_logging(_settings.log_level, _settings.log_json)

logger = structlog.get_logger()

# Shared across all sessions; rebuilt when the LLM settings change.
# Each browser tab keeps its own hub (transcript + state) in gr.State.
_registry: Optional[AgentRegistry] = None


def get_or_create_registry() -> AgentRegistry:
    global _registry

    if _registry is None:
        logger.info("initializing_agent_registry", model=_settings.llm_model)
        _registry = create_agent_registry(_settings, create_llm_client(_settings))
        logger.info("agent_registry_ready", agents=len(_registry))

    return _registry


def ensure_hub(hub: Optional[AgentsHub]) -> AgentsHub:
    """Return the tab's hub, replacing it when the registry was rebuilt."""
    registry = get_or_create_registry()
    if hub is None or hub.registry is not registry:
        hub = create_hub(registry)
        logger.info("session_hub_created")
    return hub


def load_session(hub: Optional[AgentsHub]):
    hub = ensure_hub(hub)
    return to_chat_messages(hub.messages), hub


def clear_session(hub: Optional[AgentsHub]):
    if hub is not None and hub.is_busy:
        gr.Warning("Wait for the current task to finish before clearing the chat.")
        return to_chat_messages(hub.messages), hub
    hub = create_hub(get_or_create_registry())
    return to_chat_messages(hub.messages), hub


async def respond(message: str, hub: Optional[AgentsHub]):
    """Submit a message and stream transcript updates to the chatbot."""
    hub = ensure_hub(hub)

    if not message or not message.strip():
        yield to_chat_messages(hub.messages), gr.update(), hub
        return

    if hub.is_busy:
        gr.Warning(f"{hub.state.tag} is still working on the previous task.")
        yield to_chat_messages(hub.messages), gr.update(), hub
        return

    logger.info("message_received", length=len(message))

    try:
        yield to_chat_messages(hub.messages), gr.update(value="", interactive=False), hub
        async for event in hub.submit_stream(message):
            if event.type == HubEventType.NOTIFICATION:
                gr.Warning(f"{event.notification.title}: {event.notification.description}")
            elif event.type in (HubEventType.MESSAGE, HubEventType.SETTLED):
                yield to_chat_messages(hub.messages), gr.update(interactive=False), hub
    except HubBusyError as e:
        gr.Warning(str(e))
    finally:
        logger.info("message_completed")

    yield to_chat_messages(hub.messages), gr.update(interactive=True), hub


# =============================================================================
# LLM Settings Management
# =============================================================================

def update_llm_config(base_url: str, model: str, api_key: str) -> str:
    global _settings, _registry

    _settings = _settings.with_llm(base_url=base_url.strip(), model=model.strip(), api_key=api_key.strip())
    _registry = None
    # Each tab starts a fresh transcript on its next interaction

    logger.info("llm_config_updated", base_url=_settings.llm_base_url, model=_settings.llm_model)
    return f"Configuration updated. Using model `{_settings.llm_model}` at `{_settings.llm_base_url}`"


async def check_connection() -> str:
    state = await HttpHealthProbe().check(create_endpoint(_settings))
    logger.info("llm_health_checked", status=state.status, detail=state.detail)
    return f"Endpoint status: **{state.status}** ({state.detail})"


def agents_overview() -> str:
    lines = ["| Tag | Agent | Input |", "|---|---|---|"]
    for agent in get_or_create_registry().list_agents():
        hint = (agent.input_hint or "").replace("|", "\\|").replace("<", "&lt;").replace(">", "&gt;")
        lines.append(f"| `{agent.mention_tag}` | {agent.name} | {hint} |")
    return "\n".join(lines)


# =============================================================================
# Gradio UI
# =============================================================================

with gr.Blocks(title="AI Agents Hub") as demo:
    gr.Markdown("# AI Agents Hub")

    # Per-tab hub; released by Gradio when the tab closes
    hub_state = gr.State(None)

    with gr.Accordion("LLM Settings (Ollama / OpenAI / Gemini)", open=False):
        gr.Markdown("""
        Configure your LLM endpoint. Default is **Ollama** running locally.

        **Popular Ollama models:** `llama3.2`, `llama3.1`, `qwen2.5`, `mistral`
        """)

        with gr.Row():
            base_url_input = gr.Textbox(
                label="API Base URL",
                value=_settings.llm_base_url,
                placeholder="http://localhost:11434/v1",
            )
            model_input = gr.Textbox(
                label="Model Name",
                value=_settings.llm_model,
                placeholder="llama3.2",
            )

        with gr.Row():
            api_key_input = gr.Textbox(
                label="API Key (optional for Ollama)",
                value="",
                placeholder="sk-xxx or 'ollama'",
                type="password",
            )
            apply_btn = gr.Button("Apply Settings", variant="secondary")
            check_btn = gr.Button("Check Connection", variant="secondary")

        config_status = gr.Markdown("")

        apply_btn.click(
            update_llm_config,
            inputs=[base_url_input, model_input, api_key_input],
            outputs=[config_status],
        )
        check_btn.click(check_connection, None, [config_status])

    with gr.Accordion("Available Agents", open=False):
        gr.Markdown(agents_overview())

    chatbot = gr.Chatbot(
        label="Conversation",
        height=520,
    )

    with gr.Row():
        msg = gr.Textbox(
            label="Your message",
            placeholder="@agent task (e.g., @recon <Nmap scan output>)",
            scale=4,
            show_label=False,
        )
        submit_btn = gr.Button("Send", variant="primary", scale=1)

    with gr.Row():
        clear_btn = gr.Button("Clear Chat")

    demo.load(load_session, [hub_state], [chatbot, hub_state])
    msg.submit(respond, [msg, hub_state], [chatbot, msg, hub_state])
    submit_btn.click(respond, [msg, hub_state], [chatbot, msg, hub_state])
    clear_btn.click(clear_session, [hub_state], [chatbot, hub_state])


if __name__ == "__main__":
    logger.info("starting_gradio_app", port=_settings.server_port)
    demo.launch(
        server_name="0.0.0.0",
        server_port=_settings.server_port,
        share=False,
    )
