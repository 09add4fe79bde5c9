"""JSON output for machine-parseable command results."""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cargo_index.cli.output import machine_output
from cargo_index.core.resolver import ResolvedRegistry


class RegistryResponse(BaseModel):
    """Successful resolution result.

    Attributes:
        registry_url: Index URL at the end of the source replacement chain
        short_name: Cache directory name, "<host>-<hash>"
        cache_path: Full path of the index cache directory
    """

    model_config = ConfigDict(strict=True, frozen=True)

    registry_url: str
    short_name: str
    cache_path: str

    @staticmethod
    def from_resolved(resolved: ResolvedRegistry) -> "RegistryResponse":
        return RegistryResponse(
            registry_url=resolved.registry_url.as_str(),
            short_name=resolved.short_name,
            cache_path=str(resolved.cache_path),
        )


class ErrorResponse(BaseModel):
    """Error result.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "RegistryNotFoundError")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def emit_json(data: dict[str, Any]) -> None:
    """Write a JSON document to stdout.

    For pydantic models, call model.model_dump(mode="json") first.
    """
    machine_output(json.dumps(data, indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Write an error as JSON and exit.

    Raises:
        SystemExit: Always, with `exit_code`
    """
    response = ErrorResponse(error=error, error_type=error_type, exit_code=exit_code)
    emit_json(response.model_dump(mode="json"))
    raise SystemExit(exit_code)


def json_error_boundary(func: Callable) -> Callable:
    """Decorator that reports exceptions as JSON when the command runs in JSON mode.

    Inspects the `output_format` keyword argument. In "json" mode any
    exception becomes an ErrorResponse on stdout; otherwise exceptions bubble
    up for the regular error boundary.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            if kwargs.get("output_format", "text") != "json":
                raise
            emit_json_error(str(e), type(e).__name__, exit_code=1)

    return wrapper
