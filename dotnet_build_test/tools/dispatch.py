"""Invoke tools by name and turn failures into error responses."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from dotnet_build_test.config import DotnetConfig
from dotnet_build_test.tools.loading import load_tool_manifest

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ToolResponse:
    """Text response of a tool call.

    ``payload`` holds the structured result for successful calls.
    """

    text: str
    is_error: bool = False
    payload: Mapping[str, Any] | None = None

    @property
    def success(self) -> bool:
        """Whether the call succeeded and its result reports success."""
        return (
            not self.is_error
            and self.payload is not None
            and bool(self.payload.get("success"))
        )


async def call_tool(
    name: str,
    arguments: Mapping[str, Any],
    config: DotnetConfig | None = None,
) -> ToolResponse:
    """Call a tool and return its JSON text, or an error response.

    Exceptions raised while loading the tool, validating its arguments or
    running it are reported as ``Error: <message>`` responses.
    """
    config = config or DotnetConfig()

    try:
        manifest = load_tool_manifest(name)
        parsed = manifest.parse_arguments(arguments)
        payload = await manifest.handler(parsed, config)
    except Exception as e:
        log.error("Tool %s failed: %s", name, e, exc_info=e)
        return ToolResponse(text=f"Error: {e}", is_error=True)

    return ToolResponse(
        text=json.dumps(payload, separators=(",", ":")),
        payload=payload,
    )
