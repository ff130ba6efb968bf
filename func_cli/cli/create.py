"""Create CLI for scaffolding a function project."""

from __future__ import annotations

import os

import click
from click.core import ParameterSource
from click.shell_completion import CompletionItem

from func_cli.application.config_binding import bind_create_settings, empty_env_vars
from func_cli.application.config_resolver import ConfigResolver
from func_cli.application.create_service import CreateFunctionService
from func_cli.domain.exceptions import FuncError
from func_cli.domain.models import BUILTIN_RUNTIMES, DEFAULT_RUNTIME, DEFAULT_TEMPLATE
from func_cli.infrastructure.factory import InfrastructureFactory
from func_cli.logging_config import setup_logging

FLAG_NAMES = ("confirm", "runtime", "repositories", "template")


def complete_runtimes(ctx: click.Context, param: click.Parameter, incomplete: str):
    """Shell completion for --runtime."""
    repositories = ctx.params.get("repositories") or ""
    catalog = InfrastructureFactory.create_runtime_catalog(repositories)
    return [CompletionItem(r) for r in catalog.list_runtimes() if r.startswith(incomplete)]


def explicit_flags(ctx: click.Context) -> dict:
    """Flag values given on the command line, keyed by setting name."""
    flags = {
        name: ctx.params.get(name)
        for name in FLAG_NAMES
        if ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE
    }
    root = ctx.find_root()
    if root is not ctx and root.obj:
        flags["verbose"] = root.obj.get("verbose")
    return flags


@click.command(
    "create",
    epilog="""
\b
Examples:
  # Create a Node.js function project in the current directory,
  # choosing the directory name as the project's name.
  func create

\b
  # Create a Quarkus function project in the directory "myfunc".
  func create --runtime quarkus myfunc

\b
  # Create a function project with a CloudEvent based signature.
  func create --template events myfunc
""",
)
@click.argument("path", required=False, default="")
@click.option(
    "--confirm",
    "-c",
    is_flag=True,
    default=False,
    help="Prompt to confirm all configuration options (Env: $FUNC_CONFIRM)",
)
@click.option(
    "--runtime",
    "-l",
    default=DEFAULT_RUNTIME,
    shell_complete=complete_runtimes,
    help="Function runtime language/framework. Available runtimes: "
    f"{', '.join(BUILTIN_RUNTIMES)} (Env: $FUNC_RUNTIME)",
)
@click.option(
    "--repositories",
    "-r",
    default=None,
    help="Path to extended template repositories "
    "[default: $XDG_CONFIG_HOME/func/repositories] (Env: $FUNC_REPOSITORIES)",
)
@click.option(
    "--template",
    "-t",
    default=DEFAULT_TEMPLATE,
    help="Function template. Available templates: 'http' and 'events' (Env: $FUNC_TEMPLATE)",
)
@click.pass_context
def create(ctx, path, confirm, runtime, repositories, template):
    """Create a function project.

    Creates a new function project in PATH, or in the current directory if no
    PATH is given. The name of the project is determined by the directory name
    the project is created in.
    """
    environment = InfrastructureFactory.create_environment()
    console = InfrastructureFactory.create_console()

    defaults = {
        "runtime": DEFAULT_RUNTIME,
        "template": DEFAULT_TEMPLATE,
        "repositories": os.path.join(environment.get_config_path(), "repositories"),
        "confirm": False,
        "verbose": False,
    }

    try:
        env = environment.get_environment()
        settings = bind_create_settings(explicit_flags(ctx), env, defaults)
        setup_logging(settings.verbose)
        for name in empty_env_vars(env):
            console.print_warning(f"{name} is set but empty; ignoring it")

        resolver = ConfigResolver(
            prompter=InfrastructureFactory.create_prompter(),
            console=console,
            environment=environment,
            runtimes=InfrastructureFactory.create_runtime_catalog(settings.repositories),
        )
        service = CreateFunctionService(
            resolver=resolver,
            creator_factory=InfrastructureFactory.create_function_creator,
            console=console,
        )
        service.create([path] if path else [], settings)
    except FuncError as e:
        console.print_error(e.message)
        ctx.exit(1)


if __name__ == "__main__":
    create()
