import json

import click

from hostprobe.cli.utils import render_system_info
from hostprobe.exceptions import HostProbeError


@click.group()
@click.pass_context
def info(ctx):
    """Get OS and hardware information."""
    pass


@info.command(name='system')
@click.option('--json', 'as_json', is_flag=True, help='Print the snapshot as camelCase JSON instead of a text report.')
def get_system(as_json):
    """Get a snapshot of OS, hardware, hotfixes and network adapters."""
    from hostprobe.hwosinfo.manager import get_system_info
    try:
        system_info = get_system_info()
    except HostProbeError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(system_info.model_dump(mode="json", by_alias=True), indent=4))
    else:
        click.echo(render_system_info(system_info))
