"""Template filter management for Jinja2 stylesheet templates.

Centralizes the registration of the icon filters and globals that stylesheet
templates use, e.g.::

    .nav-arrow { background-image: {{ "arrow" | svg_icon(color="#336699") }}; }
    .share { {{ "social-share" | svg_icon_background(size="1em 1em") }} }
    {% for key in svg_icon_keys("social") %}{{ key | svg_icon }}{% endfor %}
"""

import logging
from typing import Any

import jinja2

from svg_datauri_icons.exceptions import InvalidColorError
from svg_datauri_icons.icons.background import background_declarations, format_declarations
from svg_datauri_icons.icons.color_encoder import encode_color
from svg_datauri_icons.icons.renderer import IconRenderer
from svg_datauri_icons.models.color import Color

logger = logging.getLogger(__name__)


class TemplateFilterManager:
    """Manages custom filters and globals for stylesheet templates.

    Icons that cannot be rendered come out as empty strings; the renderer
    has already logged why.
    """

    def __init__(self, jinja_env: jinja2.Environment, renderer: IconRenderer) -> None:
        """Initialize the filter manager.

        Args:
            jinja_env: Jinja2 environment to register filters on
            renderer: Icon renderer instance
        """
        self.jinja_env = jinja_env
        self.renderer = renderer

    def register_all_filters(self) -> None:
        """Register all custom filters and globals."""
        self._register_icon_filters()
        self._register_background_filters()
        self._register_color_filters()
        self._register_listing_globals()

    def _register_icon_filters(self) -> None:
        """Register the data-URI icon filter."""
        def svg_icon(icon: Any, **kwargs: Any) -> str:
            """Render an icon, or an empty string when it cannot be rendered."""
            return self.renderer.render(icon, **kwargs) or ""

        self.jinja_env.filters["svg_icon"] = svg_icon
        self.jinja_env.globals["svg_icon"] = svg_icon

    def _register_background_filters(self) -> None:
        """Register the background shorthand filter."""
        def svg_icon_background(icon: Any, indent: str = "", **kwargs: Any) -> str:
            """Render background declarations for an icon as CSS text."""
            declarations = background_declarations(self.renderer, icon, **kwargs)
            return format_declarations(declarations, indent=indent)

        self.jinja_env.filters["svg_icon_background"] = svg_icon_background
        self.jinja_env.globals["svg_icon_background"] = svg_icon_background

    def _register_color_filters(self) -> None:
        """Register the color encoding filter."""
        def svg_color(value: Any) -> str:
            """Encode a color the way icon payloads receive it."""
            try:
                return encode_color(Color.parse(value))
            except InvalidColorError as e:
                if self.renderer.config.strict:
                    raise
                logger.warning(f"Color not encoded: {e}")
                return ""

        self.jinja_env.filters["svg_color"] = svg_color

    def _register_listing_globals(self) -> None:
        """Register the icon listing globals.

        ``svg_icons`` yields the recorded icon names, which may differ from
        the registry keys that ``svg_icon`` resolves. Loops that render each
        icon should iterate ``svg_icon_keys`` instead.
        """
        self.jinja_env.globals["svg_icons"] = self.renderer.list_icons
        self.jinja_env.globals["svg_icon_keys"] = self.renderer.list_icon_keys
