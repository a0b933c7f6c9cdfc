"""Stylesheet rendering from Jinja2 templates.

Provides the template environment that stylesheet sources are rendered in,
with the icon filters registered on it.
"""

import logging
from pathlib import Path

import jinja2

from svg_datauri_icons.icons.registry import IconRegistry
from svg_datauri_icons.icons.renderer import IconRenderer
from svg_datauri_icons.icons.template_filter_manager import TemplateFilterManager
from svg_datauri_icons.models.config import AppConfig
from svg_datauri_icons.utils import file_utils


class StylesheetRenderer:
    """Renderer for icon stylesheet templates."""

    def __init__(
        self, config: AppConfig, registry: IconRegistry, template_dir: Path | None = None
    ) -> None:
        """Initialize the renderer.

        Args:
            config: Application configuration.
            registry: Registered icons.
            template_dir: Directory templates are loaded from. Falls back to
                ``config.template_dir`` and then the working directory.
        """
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.icon_renderer = IconRenderer(registry, config.icons)

        if template_dir is None:
            template_dir = Path(config.template_dir) if config.template_dir else Path.cwd()
        self.template_dir = template_dir

        # Output is CSS, not HTML, so nothing may be escaped
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_dir),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )

        self.filter_manager = TemplateFilterManager(self.jinja_env, self.icon_renderer)
        self.filter_manager.register_all_filters()

    def render_template(self, template_name: str, **context: object) -> str:
        """Render a template file from the template directory.

        Args:
            template_name: Template file name, relative to the template directory.
            **context: Extra template variables.

        Returns:
            Rendered stylesheet text.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
        """
        self.logger.debug(f"Rendering stylesheet template {template_name}")
        return self.jinja_env.get_template(template_name).render(**context)

    def render_string(self, source: str, **context: object) -> str:
        """Render stylesheet template source text.

        Args:
            source: Template source.
            **context: Extra template variables.

        Returns:
            Rendered stylesheet text.
        """
        return self.jinja_env.from_string(source).render(**context)

    def write_stylesheet(self, template_name: str, output_path: Path, **context: object) -> Path:
        """Render a template and write the result to disk.

        Args:
            template_name: Template file name.
            output_path: Destination file.
            **context: Extra template variables.

        Returns:
            The path written.
        """
        file_utils.write_text(output_path, self.render_template(template_name, **context))
        self.logger.info(f"Wrote stylesheet {output_path}")
        return output_path
