"""Load and render Jinja2 templates from a package's templates subpackage."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "next_steps.j2")
        package: The caller's package (pass __package__). Templates are loaded
            from a ``templates`` subpackage beneath it.
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template does not exist
    """
    template = importlib.resources.files(f"{package}.templates").joinpath(template_name)
    if not template.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    source = template.read_text(encoding="utf-8")
    return jinja2.Template(source).render(**kwargs)
