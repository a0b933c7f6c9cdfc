"""Background shorthand for icons.

Bundles an icon image with the repeat, position and size declarations that
usually accompany it.
"""

from typing import Any

from svg_datauri_icons.icons.renderer import IconRenderer


def background_declarations(
    renderer: IconRenderer,
    icon: Any,
    color: Any = None,
    fill_color: Any = None,
    stroke_color: Any = None,
    opacity: float = 1,
    extra_styles: str = "",
    position: str | None = None,
    size: str | None = None,
    repeat: str | None = None,
) -> dict[str, str]:
    """Build background declarations for an icon.

    The image is always rendered in ``url(...)`` form, whatever the
    configured default. If the icon cannot be rendered the
    ``background-image`` declaration is left out.

    Args:
        renderer: Renderer used for the image
        icon: Registered icon key
        color: Tint for fill and stroke
        fill_color: Fill tint
        stroke_color: Stroke tint
        opacity: Icon opacity
        extra_styles: Already percent-encoded style fragment
        position: background-position value, defaults to the config
        size: background-size value, defaults to the config
        repeat: background-repeat value, defaults to the config

    Returns:
        Property to value mapping in image, repeat, position, size order.
    """
    config = renderer.config
    image = renderer.render(
        icon,
        color=color,
        fill_color=fill_color,
        stroke_color=stroke_color,
        opacity=opacity,
        extra_styles=extra_styles,
        as_url=True,
    )

    declarations: dict[str, str] = {}
    if image is not None:
        declarations["background-image"] = image
    declarations["background-repeat"] = repeat or config.background_repeat
    declarations["background-position"] = position or config.background_position
    declarations["background-size"] = size or config.background_size
    return declarations


def format_declarations(declarations: dict[str, str], indent: str = "") -> str:
    """Print declarations as CSS, one ``property: value;`` per line."""
    return "\n".join(f"{indent}{prop}: {value};" for prop, value in declarations.items())
