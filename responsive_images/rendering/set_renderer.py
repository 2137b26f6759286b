"""
Jinja2 rendering of responsive image set templates.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape
from markupsafe import Markup


TEMPLATE_SUFFIX = ".html"


class SetRenderer:
    """Renders named templates for responsive image sets.

    Templates are looked up in an optional theme directory first and then in
    the templates bundled with the package, so a site can override
    ResponsiveImageSet.html without touching the package.
    """

    def __init__(self, theme_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the renderer.

        Args:
            theme_dir: Optional directory with template overrides.
        """
        loaders = []
        if theme_dir is not None:
            loaders.append(FileSystemLoader(str(theme_dir)))
        loaders.append(PackageLoader("responsive_images", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, context: Dict[str, Any]) -> Markup:
        """
        Render a named template.

        Args:
            template_name: Template name without extension, e.g. "ResponsiveImageSet".
            context: Template variables.

        Returns:
            Rendered markup, safe to embed in other templates.
        """
        template = self.env.get_template(template_name + TEMPLATE_SUFFIX)
        return Markup(template.render(**context))
