# src/schemastash/cli.py
"""schemastash Command Line Interface.

Entry point for the schemastash CLI tool.
"""

from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from schemastash import __version__
from schemastash.contracts import (
    ConfigurationError,
    ExportResult,
    MalformedNameError,
    SchemaRecord,
    SchemaType,
    UnsupportedTypeError,
    WriteError,
)
from schemastash.core.config import SchemaStashSettings, load_settings
from schemastash.core.logging import configure_logging, get_logger
from schemastash.plugins.config_base import PluginConfigError
from schemastash.plugins.manager import PluginManager

logger = get_logger(__name__)

app = typer.Typer(
    name="schemastash",
    help="schemastash: Save schema registry entries as local .avsc/.proto files.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"schemastash version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """schemastash: Save schema registry entries as local .avsc/.proto files."""
    pass


def _echo_validation_errors(e: ValidationError) -> None:
    typer.echo("Configuration errors:", err=True)
    for error in e.errors():
        loc = ".".join(str(x) for x in error["loc"])
        typer.echo(f"  - {loc}: {error['msg']}", err=True)


def _resolve_settings(
    settings: str | None,
    overrides: dict[str, Any],
) -> SchemaStashSettings:
    """Load settings from file (if given) and apply command-line overrides.

    Raises:
        typer.Exit: On missing file or invalid configuration.
    """
    raw: dict[str, Any] = {}
    if settings is not None:
        try:
            raw = load_settings(Path(settings)).model_dump()
        except FileNotFoundError:
            typer.echo(f"Error: Settings file not found: {settings}", err=True)
            raise typer.Exit(1) from None
        except ValidationError as e:
            _echo_validation_errors(e)
            raise typer.Exit(1) from None

    raw.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SchemaStashSettings(**raw)
    except ValidationError as e:
        _echo_validation_errors(e)
        raise typer.Exit(1) from None


@app.command()
def export(
    settings: str | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    input_path: str | None = typer.Option(
        None,
        "--input",
        "-i",
        help="JSON/JSONL registry export to read (json source).",
    ),
    output_directory: str | None = typer.Option(
        None,
        "--output-directory",
        "-o",
        help="Root directory for schema files.",
    ),
    project: str | None = typer.Option(
        None,
        "--project",
        "-p",
        help="Registry project id.",
    ),
    continue_on_error: bool = typer.Option(
        False,
        "--continue-on-error",
        help="Skip schemas that cannot be written instead of aborting.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output.",
    ),
) -> None:
    """Write every schema from the source to the output directory."""
    configure_logging(verbose)

    overrides: dict[str, Any] = {
        "output_directory": output_directory,
        "project": project,
    }
    if continue_on_error:
        overrides["fail_fast"] = False
    if input_path is not None:
        overrides["source"] = {"plugin": "json", "options": {"path": input_path}}

    config = _resolve_settings(settings, overrides)

    try:
        result = _execute_export(config)
    except (PluginConfigError, ConfigurationError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1) from None
    except (UnsupportedTypeError, MalformedNameError, WriteError) as e:
        typer.echo(f"Export aborted: {e}", err=True)
        raise typer.Exit(1) from None
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error reading schemas: {e}", err=True)
        raise typer.Exit(1) from None

    for artifact in result.artifacts:
        typer.echo(f"  wrote {artifact.path_or_uri.removeprefix('file://')}")
    for failure in result.failures:
        typer.echo(f"  skipped {failure.full_name}: {failure.error}", err=True)

    typer.echo(f"\nExport {result.status.value}: {result.schemas_written} written")
    if result.failures:
        typer.echo(f"  Skipped: {result.schemas_failed}")
        raise typer.Exit(1)


def _execute_export(config: SchemaStashSettings) -> ExportResult:
    """Instantiate the configured plugins and run the export.

    Raises:
        PluginConfigError: If a plugin is unknown or its options are invalid.
        ConfigurationError: If the output directory cannot be prepared.
    """
    from schemastash.engine.exporter import SchemaExporter

    manager = PluginManager()
    manager.register_builtin_plugins()

    source_cls = manager.get_source_by_name(config.source.plugin)
    if source_cls is None:
        raise PluginConfigError(f"Unknown source plugin: {config.source.plugin}")
    sink_cls = manager.get_sink_by_name(config.sink.plugin)
    if sink_cls is None:
        raise PluginConfigError(f"Unknown sink plugin: {config.sink.plugin}")

    logger.debug(
        "Plugins resolved",
        source=config.source.plugin,
        sink=config.sink.plugin,
        fail_fast=config.fail_fast,
    )

    # Sink first: output directory problems must surface before any schema is read
    sink = sink_cls(config.sink_options())
    source = source_cls(dict(config.source.options))

    exporter = SchemaExporter(
        source,
        sink,
        fail_fast=config.fail_fast,
        config=config.model_dump(mode="json"),
    )
    return exporter.run()


@app.command()
def validate(
    settings: str = typer.Option(
        ...,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
) -> None:
    """Validate export configuration without writing anything."""
    config = _resolve_settings(settings, {})

    manager = PluginManager()
    manager.register_builtin_plugins()
    if manager.get_source_by_name(config.source.plugin) is None:
        typer.echo(f"Unknown source plugin: {config.source.plugin}", err=True)
        raise typer.Exit(1)
    if manager.get_sink_by_name(config.sink.plugin) is None:
        typer.echo(f"Unknown sink plugin: {config.sink.plugin}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Configuration valid: {Path(settings).name}")
    typer.echo(f"  Source: {config.source.plugin}")
    typer.echo(f"  Sink: {config.sink.plugin}")
    typer.echo(f"  Output: {config.output_directory / config.project}")
    typer.echo(f"  Fail fast: {config.fail_fast}")


@app.command()
def location(
    name: str = typer.Argument(
        ...,
        help="Registry name, e.g. projects/p1/schemas/s1[@rev].",
    ),
    schema_type: str = typer.Argument(
        ...,
        help="Schema type (AVRO or PROTOCOL_BUFFER).",
    ),
    output_directory: str = typer.Option(
        ".",
        "--output-directory",
        "-o",
        help="Root directory for schema files.",
    ),
) -> None:
    """Print where a schema would be written, without writing it."""
    from schemastash.storage.local import LocalSchemaStorage

    record = SchemaRecord(
        full_name=name,
        type=SchemaType.parse(schema_type),
        definition="",
    )
    try:
        path = LocalSchemaStorage(Path(output_directory)).location(record)
    except (UnsupportedTypeError, MalformedNameError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(str(path))


# Plugins subcommand group
plugins_app = typer.Typer(help="Plugin management commands.")
app.add_typer(plugins_app, name="plugins")


@plugins_app.command("list")
def plugins_list(
    plugin_type: str | None = typer.Option(
        None,
        "--type",
        "-t",
        help="Filter by plugin type (source, sink).",
    ),
) -> None:
    """List available plugins."""
    valid_types = {"source", "sink"}

    if plugin_type and plugin_type not in valid_types:
        typer.echo(f"Error: Invalid type '{plugin_type}'.", err=True)
        typer.echo(f"Valid types: {', '.join(sorted(valid_types))}", err=True)
        raise typer.Exit(1)

    manager = PluginManager()
    manager.register_builtin_plugins()
    specs = manager.get_specs()

    types_to_show = [plugin_type] if plugin_type else ["source", "sink"]
    for ptype in types_to_show:
        typer.echo(f"\n{ptype.upper()}S:")
        matching = [spec for spec in specs if spec.kind == ptype]
        if not matching:
            typer.echo("  (none available)")
        for spec in matching:
            typer.echo(f"  {spec.name:12} - {spec.description}")

    typer.echo()  # Final newline


if __name__ == "__main__":
    app()
