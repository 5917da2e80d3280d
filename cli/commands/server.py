# cli/commands/server.py
"""API server CLI command."""

import click


@click.command()
@click.option('--host', default=None, help='Bind address (defaults to API_HOST)')
@click.option('--port', type=int, default=None, help='Bind port (defaults to API_PORT)')
@click.option('--reload', is_flag=True, help='Reload on code changes')
@click.pass_obj
def serve(settings, host, port, reload):
    """Run the workflow generation API."""
    import uvicorn

    uvicorn.run(
        "processarchitec.api.rest.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
