"""CLI entry point for city-brief."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from city_brief import __version__

log = logging.getLogger('cb.cli')


@click.command()
@click.argument('city', default='London')
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option('-m', '--model', default=None, help='Ollama model name (e.g. gemma:2b).')
@click.option('--host', default=None, help='Ollama server URL (e.g. http://127.0.0.1:11434).')
@click.option('--strict', is_flag=True, help='Reject replies missing city/industry/fun.')
@click.option('-v', '--verbose', is_flag=True, help='Log requests and raw replies to stderr.')
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Also write debug logs to this file.',
)
@click.version_option(version=__version__)
def cli(city, config_path, model, host, strict, verbose, log_file):
    """city-brief -- ask a local model what CITY is known for and what to do there."""
    from city_brief.l1_entities.errors import ChatResponseError  # noqa: PLC0415 -- deferred: keep --help light
    from city_brief.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: ollama not loaded on --help
        DependencyContainer,
    )
    from city_brief.l4_frameworks_and_drivers.logging_setup import setup_logging  # noqa: PLC0415

    setup_logging(verbose=verbose, log_file=Path(log_file) if log_file else None)

    overrides: dict = {}
    if model:
        overrides.setdefault('inference', {})['model'] = model
    if strict:
        overrides['parsing'] = {'strict': strict}
    if host:
        overrides.setdefault('inference', {})['host'] = host

    try:
        config = DependencyContainer.config_loader().load(config_path, overrides=overrides)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    log.info(
        'Config: model=%s host=%s strict=%s',
        config.inference.model,
        config.inference.host,
        config.parsing.strict,
    )
    container = DependencyContainer(config)
    _preflight_ollama(container.llm_client, config.inference.model)

    try:
        info = asyncio.run(container.city_info.execute(city, model=config.inference.model))
    except ChatResponseError as e:
        click.echo(f'Error: {e}', err=True)
        raw_text = getattr(e, 'raw_text', '')
        if raw_text:
            click.echo(f'Model output was:\n{raw_text}', err=True)
        sys.exit(1)

    click.echo(json.dumps(info.model_dump(), indent=2, ensure_ascii=False))


def _preflight_ollama(client, model: str) -> None:
    """Warn (but carry on) when the server is unreachable or *model* is not pulled."""
    ok, err = client.check_connectivity()
    if not ok:
        click.echo(f'Warning: Ollama not reachable ({err}). The request will likely fail.', err=True)
        return
    if client.check_models([model]):
        click.echo(f"Warning: model '{model}' not found locally. Run: ollama pull {model}", err=True)
