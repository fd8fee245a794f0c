import click
import json
import logging
from functools import wraps
from importlib.metadata import version as package_version, PackageNotFoundError
from jinja2 import TemplateNotFound
from viewrender.container import Container, TEMPLATE_RENDERER
from viewrender.exceptions import ViewRenderError
from viewrender.utils import load_config, parse_param, LogFormatter

log = logging.getLogger(__name__)


def setup_command(func):
    """Decorator to handle common CLI setup (logging, config loading, version)."""

    @wraps(func)
    def wrapper(config, debug, version=None, **kwargs):
        if version:
            try:
                click.echo(package_version("viewrender"))
            except PackageNotFoundError:
                click.echo("unknown")
            return

        log_handler = logging.StreamHandler()
        log_handler.setFormatter(LogFormatter())
        logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, handlers=[log_handler])

        try:
            config_obj = load_config(config)
        except (OSError, ValueError) as error:
            raise click.ClickException(f"Unable to load configuration {config}: {error}")
        if debug:
            log.debug(json.dumps(config_obj.model_dump(), indent=4, default=str))

        return func(config_obj=config_obj, debug=debug, **kwargs)

    return wrapper


@click.group()
def cli():
    pass


@click.command()
@click.argument("template")
@click.option("--config", default="config.yaml", help="Configuration file.")
@click.option("--debug", default=False, is_flag=True, help="Enable debug.")
@click.option("--version", is_flag=True, help="Show the application's version.")
@click.option("--param", "params", multiple=True, help="Template parameter as key=value, can be repeated.")
@click.option("--no-layout", is_flag=True, help="Render template without layout.")
@setup_command
def render(config_obj, debug, template, params, no_layout):
    """Render TEMPLATE (name or namespace::name) to stdout."""
    variables = {}
    for param in params:
        try:
            key, value = parse_param(param)
        except ValueError as error:
            raise click.BadParameter(str(error), param_hint="--param")
        variables[key] = value
    if no_layout:
        variables["layout"] = False

    renderer = Container.from_config(config_obj).get(TEMPLATE_RENDERER)
    try:
        click.echo(renderer.render(template, variables))
    except TemplateNotFound as error:
        raise click.ClickException(f"Template not found: {error.name}")
    except ViewRenderError as error:
        raise click.ClickException(str(error))


@click.command()
@click.option("--config", default="config.yaml", help="Configuration file.")
@click.option("--debug", default=False, is_flag=True, help="Enable debug.")
@setup_command
def paths(config_obj, debug):
    """List template paths by namespace."""
    renderer = Container.from_config(config_obj).get(TEMPLATE_RENDERER)
    lines = []
    for template_path in renderer.get_paths():
        namespace = template_path.namespace if template_path.namespace is not None else "(default)"
        lines.append(f"{namespace}\t{template_path.path}")
    click.echo("\n".join(lines))


cli.add_command(render)
cli.add_command(paths)

if __name__ == "__main__":
    cli()
