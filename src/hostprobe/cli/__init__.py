import logging

import click

from hostprobe.cli.info import info
from hostprobe.cli.process import process
from hostprobe.config.settings import config


@click.group()
@click.option("--config", "config_path", help="Path to the configuration file.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging level.")
@click.pass_context
def main(ctx, config_path, log_level):
    """Hostprobe CLI"""
    ctx.ensure_object(dict)
    try:
        ctx.obj["config_path"] = config.load_file(config_path)
    except (OSError, ValueError) as e:
        raise click.FileError(config_path or "configuration", hint=str(e))

    if log_level:
        config.log_level = log_level.upper()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


main.add_command(info)
main.add_command(process)


@main.command()
@click.option('--host', default='127.0.0.1', help='The host to bind to.')
@click.option('--port', default=8000, help='The port to bind to.')
def server(host, port):
    """Run the FastAPI server."""
    import uvicorn

    from hostprobe.api.server import app
    uvicorn.run(app, host=host, port=port)
