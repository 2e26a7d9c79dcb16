import click

from hostprobe.exceptions import ProcessKillError


@click.group()
@click.pass_context
def process(ctx):
    """Process commands"""
    pass


@process.command(name='kill')
@click.argument('pid', type=int)
def kill(pid):
    """Forcefully terminate process PID."""
    from hostprobe.process.manager import kill_process
    try:
        kill_process(pid)
    except ProcessKillError as e:
        raise click.ClickException(str(e))
    click.echo(f"Process {pid} terminated.")
