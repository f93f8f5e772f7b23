"""Command-line interface for readcore."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
import structlog

from readcore import __version__
from readcore.config import SUPPORTED_PARSERS, Config, load_config
from readcore.crawler.fetcher import FetchError, fetch_html, is_url
from readcore.extractor import Readability, Sanitizer
from readcore.observability import configure_logging

logger = structlog.get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """readcore - extract the readable content of HTML documents."""
    ctx.ensure_object(dict)
    cfg = load_config(Path(config) if config else None)
    if log_level:
        cfg.monitoring.log_level = log_level
    configure_logging(cfg.monitoring)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("source")
@click.option("--charset", default=None, help="Charset of the document (default: from config or server)")
@click.option("--delimiter", default=None, help="Separator between article and site name in the title")
@click.option("--parser", type=click.Choice(list(SUPPORTED_PARSERS)), default=None)
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
@click.pass_context
def extract(
    ctx: click.Context,
    source: str,
    charset: Optional[str],
    delimiter: Optional[str],
    parser: Optional[str],
    pretty: bool,
) -> None:
    """Extract SOURCE (a file, '-' for stdin, or an http(s) URL) and print JSON."""
    cfg: Config = ctx.obj["config"]
    settings = cfg.extraction
    if parser:
        settings = settings.model_copy(update={"parser": parser})
    if delimiter is not None:
        settings = settings.model_copy(update={"title_delimiter": delimiter})

    try:
        markup, detected_charset = _read_source(source, cfg)
    except (OSError, FetchError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    readability = Readability(
        markup,
        charset or detected_charset,
        settings=settings,
        sanitizer=Sanitizer(cfg.sanitizer),
    )
    result = readability.get_content()

    if result is None:
        click.echo("Error: document could not be parsed", err=True)
        sys.exit(1)

    click.echo(json.dumps(result.to_dict(), indent=2 if pretty else None, ensure_ascii=False))
    if not result.has_content:
        sys.exit(1)


def _read_source(source: str, cfg: Config) -> tuple[bytes, Optional[str]]:
    """Load raw bytes for SOURCE and the charset declared alongside them."""
    if source == "-":
        return click.get_binary_stream("stdin").read(), None
    if is_url(source):
        page = fetch_html(source, cfg.fetch)
        return page.content, page.charset
    return Path(source).read_bytes(), None


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
