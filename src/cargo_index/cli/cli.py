import logging
from pathlib import Path

import click

from cargo_index.cli.error_boundary import cli_error_boundary
from cargo_index.cli.json_output import RegistryResponse, emit_json, json_error_boundary
from cargo_index.cli.output import machine_output
from cargo_index.core.constants import DEBUG_ENV_VAR
from cargo_index.core.context import CargoIndexContext, create_context
from cargo_index.core.resolver import resolve_registry

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _enable_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.command("cargo-index", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="cargo-index")
@click.option(
    "--manifest-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to Cargo.toml (defaults to ./Cargo.toml).",
)
@click.option(
    "--registry",
    "registry_name",
    default=None,
    help="Registry name from [registries] (defaults to crates.io).",
)
@click.option(
    "--print",
    "show",
    type=click.Choice(["path", "url", "short-name"]),
    default="path",
    help="Which value to print (defaults to the cache path).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--debug", is_flag=True, help="Log config discovery and source replacement.")
@click.pass_context
@cli_error_boundary
@json_error_boundary
def cli(
    ctx: click.Context,
    manifest_path: Path | None,
    registry_name: str | None,
    show: str,
    output_format: str,
    debug: bool,
) -> None:
    """Print the directory Cargo caches a registry's index in.

    Config files are merged from every ancestor of the manifest's directory and
    from the cargo home, and source replacement is followed, exactly as Cargo
    does it.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    app: CargoIndexContext = ctx.obj

    if debug or app.environment.get_env(DEBUG_ENV_VAR):
        _enable_debug_logging()

    manifest = manifest_path if manifest_path is not None else app.default_manifest_path
    resolved = resolve_registry(manifest, registry_name, app.environment)

    if output_format == "json":
        emit_json(RegistryResponse.from_resolved(resolved).model_dump(mode="json"))
    elif show == "url":
        machine_output(resolved.registry_url.as_str())
    elif show == "short-name":
        machine_output(resolved.short_name)
    else:
        machine_output(str(resolved.cache_path))


def main() -> None:
    """CLI entry point used by the `cargo-index` console script."""
    cli()
