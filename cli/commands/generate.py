# cli/commands/generate.py
"""Workflow generation CLI commands."""

import asyncio
import functools
import json
from pathlib import Path

import click
import yaml

from processarchitec.ai.orchestrator import FallbackOrchestrator
from processarchitec.ai.providers import build_providers, close_providers
from processarchitec.workflow.document import BusinessContext


def async_command(f):
    """Decorator to run async functions with Click."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def load_context(path):
    """Read a business context from a JSON or YAML file."""
    if not path:
        return BusinessContext()

    text = Path(path).read_text(encoding="utf-8")
    if Path(path).suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)

    if data is None:
        return BusinessContext()
    if not isinstance(data, dict):
        raise click.BadParameter("business context must be a mapping", param_hint="--context")
    return BusinessContext.model_validate(data)


@click.command()
@click.argument('requirement', nargs=-1, required=True)
@click.option('--context', '-c', 'context_file', type=click.Path(exists=True, dir_okay=False),
              help='JSON or YAML file with the business context')
@click.option('--format', 'output_format', type=click.Choice(['json', 'yaml']), default='json',
              help='Output format')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the workflow to a file')
@click.option('--offline', is_flag=True, help='Skip AI providers and use heuristic synthesis only')
@click.pass_obj
@async_command
async def generate(settings, requirement, context_file, output_format, output, offline):
    """Generate a workflow from a natural language requirement."""
    requirement_text = ' '.join(requirement)
    business_context = load_context(context_file)

    providers = [] if offline else build_providers(settings)
    try:
        result = await FallbackOrchestrator(providers).run(business_context, requirement_text)
    finally:
        await close_providers(providers)

    document = result.document.to_dict()
    if output_format == 'yaml':
        rendered = yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
    else:
        rendered = json.dumps(document, indent=2)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered, encoding="utf-8")
        click.echo(f"Workflow saved to: {output_path}", err=True)
    else:
        click.echo(rendered)

    click.echo(f"Generated by: {result.report.source}", err=True)


@click.command()
@click.pass_obj
def providers(settings):
    """List configured AI providers in fallback order."""
    configured = build_providers(settings)
    try:
        if not configured:
            click.echo("No AI providers configured; workflows use heuristic synthesis.")
            return
        for position, provider in enumerate(configured, start=1):
            click.echo(f"{position}. {provider.name} ({provider.options.model})")
        click.echo(f"{len(configured) + 1}. heuristic")
    finally:
        asyncio.run(close_providers(configured))
