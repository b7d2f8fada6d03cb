"""Load and render Jinja2 templates from a package's templates directory."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str = "blueprint", **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Path within the templates directory
            (e.g. "ci/github/ci.yaml.j2").
        package: Package whose ``templates`` subpackage holds the template.
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(*template_name.split("/")).read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)
