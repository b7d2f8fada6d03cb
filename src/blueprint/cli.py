"""Top-level Click group for the blueprint CLI."""

import os

import click

from blueprint import __version__
from blueprint.answers import CIProvider, ProjectType
from blueprint.errors import BlueprintError
from blueprint.execute import execute
from blueprint.plan import package_name, plan_layout, project_root, template_data
from blueprint.tui.prompts import prompt_answers


def _enum_option(enum_cls):
    return click.Choice([member.value for member in enum_cls])


def _fail(message):
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def _check_project_root(root):
    if os.path.isdir(root) and os.listdir(root):
        _fail(f"{root} already exists and is not empty")


def generate_project(answers, base_dir="."):
    """Plan and write the project on disk, returning the written paths."""
    layout = plan_layout(answers, base_dir)
    return execute(layout, template_data(answers))


@click.group()
@click.version_option(__version__, prog_name="blueprint")
def main():
    """blueprint - scaffold a new Python project from templates."""


@main.command("new")
@click.option("--name", "project_name", help="Project name (skips the question).")
@click.option("--ci", "ci_provider", type=_enum_option(CIProvider), help="CI provider.")
@click.option("--type", "project_type", type=_enum_option(ProjectType), help="Project type.")
@click.option("--host", "hostname", help="Databricks host name (Databricks Asset Bundles only).")
@click.option(
    "--output-dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory to create the project in.",
)
def new_cmd(project_name, ci_provider, project_type, hostname, output_dir):
    """Interview for the project settings and generate the project."""
    given = {
        "project_name": project_name,
        "ci_provider": CIProvider(ci_provider) if ci_provider else None,
        "project_type": ProjectType(project_type) if project_type else None,
        "hostname": hostname,
    }
    if project_name is not None:
        if not package_name(project_name):
            raise click.BadParameter(
                "needs at least one letter or digit.", param_hint="'--name'"
            )
        _check_project_root(project_root(given, output_dir))

    try:
        answers = prompt_answers(given=given)
    except EOFError:
        _fail("Input closed.")
    except BlueprintError as e:
        _fail(e)

    root = project_root(answers, output_dir)
    _check_project_root(root)

    try:
        written = generate_project(answers, output_dir)
    except BlueprintError as e:
        _fail(e)

    click.echo(f"Created {len(written)} files in {root}")
