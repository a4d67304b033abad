"""Configuration for running the dotnet tools."""

from pydantic import BaseModel, PositiveFloat, PositiveInt


class DotnetConfig(BaseModel):
    """Configuration shared by the build and test tools."""

    dotnet_path: str = "dotnet"
    test_logger: str = "console;verbosity=detailed"
    # Raw build output returned alongside parsed diagnostics is cut at this size
    max_raw_chars: PositiveInt = 4000
    timeout: PositiveFloat | None = None
