"""CLI entry point for iodocs-generator."""

from pathlib import Path

import click

from iodocs_generator.config import ConfigError, GeneratorConfig, load_config, resolve_endpoints
from iodocs_generator.generator.document import synthesize, to_json
from iodocs_generator.generator.validator import check as check_document
from iodocs_generator.generator.validator import method_count
from iodocs_generator.logging import configure_logging
from iodocs_generator.scanner.endpoint import scan_endpoints

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _load(config_path: Path, base_path: str | None) -> tuple[GeneratorConfig, list[type]]:
    """Load the config file and import its endpoint classes."""
    try:
        config = load_config(config_path)
        if base_path:
            config = config.model_copy(update={"base_path": base_path})
        endpoints = resolve_endpoints(config.endpoints)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    return config, endpoints


def _report(problems: dict[str, str]) -> None:
    for location, message in problems.items():
        click.echo(f"  {location}: {message}", err=True)


@click.group()
@click.option("--log-level", default="WARNING", type=click.Choice(LOG_LEVELS), help="Logging level.")
def main(log_level: str):
    """Generate I/O Docs JSON from annotated API handler classes."""
    configure_logging(level=log_level, force_reconfigure=True)


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file for the JSON document (stdout if omitted).")
@click.option("--base-path", envvar="IODOCS_BASE_PATH", default=None, help="Override the base path from the config file.")
@click.option("--strict", is_flag=True, help="Fail if the document has warnings or duplicate method names.")
def generate(config_path: Path, output: Path | None, base_path: str | None, strict: bool):
    """Generate an I/O Docs document from a YAML config."""
    config, endpoints = _load(config_path, base_path)
    document = synthesize(config.api_meta(), endpoints, config.extension_parameters)

    if strict:
        problems = check_document(document, scan_endpoints(endpoints))
        if problems:
            _report(problems)
            raise click.ClickException(f"Found {len(problems)} problems in the document.")

    text = to_json(document)
    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Documented {method_count(document)} methods in {output}", err=True)


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(config_path: Path):
    """Report enumeration warnings and duplicate method names."""
    config, endpoints = _load(config_path, None)
    document = synthesize(config.api_meta(), endpoints, config.extension_parameters)
    problems = check_document(document, scan_endpoints(endpoints))

    if problems:
        click.echo(f"Found {len(problems)} problems:", err=True)
        _report(problems)
        raise SystemExit(1)
    click.echo(f"OK: {method_count(document)} methods documented.")
