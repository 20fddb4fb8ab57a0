"""The create_greeting action and the greeting://templates resource."""

from typing import Any, Final

from greeting_server.registry import CapabilityRegistry
from greeting_server.types.actions import InputSchema, TextContent

DEFAULT_STYLE: Final[str] = "casual"
TEMPLATES_URI: Final[str] = "greeting://templates"

GREETINGS: Final[dict[str, str]] = {
    "formal": "Good day, {name}. It is a pleasure to meet you.",
    "casual": "Hi {name}! How's it going?",
    "excited": "Hey {name}!!! So awesome to see you! \U0001f389",
}

STYLE_DESCRIPTIONS: Final[dict[str, str]] = {
    "formal": "Professional, polite greeting",
    "casual": "Friendly, everyday greeting",
    "excited": "Enthusiastic, celebratory greeting",
}

CREATE_GREETING_SCHEMA = InputSchema(
    properties={
        "name": {
            "type": "string",
            "description": "The name of the person to greet",
        },
        "style": {
            "type": "string",
            "enum": list(GREETINGS),
            "default": DEFAULT_STYLE,
            "description": "The style of greeting (formal, casual, or excited)",
        },
    },
    required=["name"],
)


def greet(name: str, style: str = DEFAULT_STYLE) -> str:
    template = GREETINGS.get(style, GREETINGS[DEFAULT_STYLE])
    return template.format(name=name)


def create_greeting(arguments: dict[str, Any]) -> list[TextContent]:
    return [TextContent(text=greet(arguments["name"], arguments.get("style", DEFAULT_STYLE)))]


def render_templates(uri: str) -> str:
    lines = ["Available Greeting Styles:", ""]
    for number, (style, description) in enumerate(STYLE_DESCRIPTIONS.items(), start=1):
        lines.append(f"{number}. {style} - {description}")
        lines.append(f'   Example: "{greet("John", style)}"')
        lines.append("")
    lines.append('Usage: Ask Claude to "greet [name] in [style] style"')
    return "\n".join(lines)


def register_greetings(registry: CapabilityRegistry) -> None:
    """Register the greeting action and templates resource on ``registry``."""
    registry.action(
        name="create_greeting",
        description="Create a personalized greeting message",
        input_schema=CREATE_GREETING_SCHEMA,
    )(create_greeting)
    registry.resource(
        uri=TEMPLATES_URI,
        name="Greeting Templates",
        description="Available greeting styles and examples",
        mime_type="text/plain",
    )(render_templates)
