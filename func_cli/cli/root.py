"""Root CLI group for func-cli."""

import click
from click.core import ParameterSource

from func_cli import __version__
from func_cli.cli.create import create


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--verbose", "-v", is_flag=True, default=False, help="Verbose output (Env: $FUNC_VERBOSE)"
)
@click.version_option(__version__, prog_name="func")
@click.pass_context
def main(ctx, verbose):
    """Manage function projects."""
    ctx.ensure_object(dict)
    # Unset unless given, so FUNC_VERBOSE can apply
    explicit = ctx.get_parameter_source("verbose") == ParameterSource.COMMANDLINE
    ctx.obj["verbose"] = verbose if explicit else None


main.add_command(create)


if __name__ == "__main__":
    main()
