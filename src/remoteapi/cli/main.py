#!/usr/bin/env python3
"""
remoteapi CLI

Query a remote API endpoint from the command line:

    remoteapi versions http://192.168.122.1:8080/sony/camera
    remoteapi methods http://192.168.122.1:8080/sony/camera --api-version 1.0
    remoteapi call http://192.168.122.1:8080/sony/camera getAvailableShootMode
"""

import asyncio
import json
import logging
import sys
from typing import Any, List, Optional, Tuple

import click

from remoteapi import __version__
from remoteapi.client import ApiClient
from remoteapi.config import load_config
from remoteapi.core.errors import RemoteApiError
from remoteapi.core.models import ApiVersion

logger = logging.getLogger(__name__)

VERSION_CHOICES = [v.value for v in ApiVersion]


def _parse_param(value: str) -> Any:
    """Interpret a parameter as JSON, falling back to the plain string"""
    try:
        return json.loads(value)
    except ValueError:
        return value


def _echo_json(value: Any):
    click.echo(json.dumps(value, indent=2))


def _run(ctx: click.Context, coro) -> Any:
    try:
        return asyncio.run(coro)
    except RemoteApiError as e:
        click.echo(f"❌ {e.status.name} ({e.server_code}): {e.message}", err=True)
        ctx.exit(1)


def _client(ctx: click.Context, endpoint: str) -> ApiClient:
    try:
        return ApiClient(endpoint, config=ctx.obj['config'])
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='ENDPOINT')


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Path to a YAML config file')
@click.version_option(version=__version__, prog_name='remoteapi')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, config_path: Optional[str]):
    """
    remoteapi - call JSON-RPC style remote APIs

    Every failure is reported as a single status code.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    elif verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s'
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )

    ctx.ensure_object(dict)
    try:
        ctx.obj['config'] = load_config(config_path)
    except ValueError as e:
        raise click.UsageError(str(e))
    logger.debug(f"Using config: {ctx.obj['config']}")


@cli.command()
@click.argument('endpoint')
@click.pass_context
def versions(ctx: click.Context, endpoint: str):
    """List the API versions supported by ENDPOINT"""
    client = _client(ctx, endpoint)
    result = _run(ctx, client.get_versions())
    for version in result:
        click.echo(version)


@cli.command()
@click.argument('endpoint')
@click.option('--api-version', default='', help='API set version to describe (default: all)')
@click.pass_context
def methods(ctx: click.Context, endpoint: str, api_version: str):
    """List the methods ENDPOINT describes"""
    client = _client(ctx, endpoint)
    result = _run(ctx, client.get_method_types(api_version))
    for method in result:
        params = ", ".join(method.parameter_types)
        results = ", ".join(method.result_types)
        click.echo(f"{method.name} v{method.version} ({params}) -> ({results})")


@cli.command()
@click.argument('endpoint')
@click.argument('method')
@click.argument('params', nargs=-1)
@click.option('--api-version', type=click.Choice(VERSION_CHOICES), default=None,
              help='Version of the API')
@click.pass_context
def call(ctx: click.Context, endpoint: str, method: str, params: Tuple[str, ...],
         api_version: Optional[str]):
    """Call METHOD on ENDPOINT with optional JSON PARAMS"""
    client = _client(ctx, endpoint)
    parsed: List[Any] = [_parse_param(p) for p in params]
    version = ApiVersion(api_version) if api_version else None
    result = _run(ctx, client.call(method, parsed, version))
    _echo_json(result)


def main():
    """Main CLI entry point"""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\n⚠️  Interrupted by user")
        sys.exit(130)


if __name__ == '__main__':
    main()
