"""Tool manifest definition and shared tool arguments."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import Field, ValidationError

from dotnet_build_test.config import DotnetConfig
from dotnet_build_test.models.base import Model

ArgsT = TypeVar("ArgsT", bound=Model)


class InvalidArgumentsError(ValueError):
    """Raised when a tool is called with missing or invalid arguments."""


class SolutionArguments(Model):
    """Arguments of tools operating on a solution."""

    solution_path: str = Field(
        ..., description="Path to a .sln file or a directory containing one."
    )


@dataclass(frozen=True, kw_only=True)
class ToolManifest(Generic[ArgsT]):
    """Manifest describing a tool plugin.

    The manifest holds the arguments model and the async handler, so tools
    can be looked up by name and invoked without knowing their module.
    """

    name: str
    description: str
    arguments_cls: type[ArgsT]
    handler: Callable[[ArgsT, DotnetConfig], Awaitable[Mapping[str, Any]]]

    def parse_arguments(self, arguments: Mapping[str, Any]) -> ArgsT:
        """Validate raw arguments into the tool's arguments model.

        Raises:
            InvalidArgumentsError: If a field is missing, blank, or invalid

        """
        try:
            parsed = self.arguments_cls.model_validate(arguments)
        except ValidationError as e:
            fields = sorted(
                {str(error["loc"][0]) for error in e.errors() if error["loc"]}
            )
            raise InvalidArgumentsError(_required_message(fields)) from e

        blank = sorted(
            name
            for name, value in parsed.model_dump().items()
            if isinstance(value, str) and not value.strip()
        )
        if blank:
            raise InvalidArgumentsError(_required_message(blank))
        return parsed


def _required_message(fields: list[str]) -> str:
    if not fields:
        return "Invalid arguments."
    return f"{', '.join(fields)} is required."
