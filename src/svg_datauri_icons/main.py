"""Command line interface for the SVG data-URI icon helpers.

Loads the configuration and the generated icon manifest, then renders a
stylesheet template, lists registered icons, or prints a single icon value.
"""

import argparse
import logging
import sys
from pathlib import Path

import jinja2
import yaml
from pydantic import ValidationError

from svg_datauri_icons.exceptions import (
    ConfigFileNotFoundError,
    IconStylesError,
    InvalidConfigError,
    chain_exception,
)
from svg_datauri_icons.icons.registry import IconRegistry
from svg_datauri_icons.icons.renderer import IconRenderer
from svg_datauri_icons.icons.stylesheet import StylesheetRenderer
from svg_datauri_icons.models.config import AppConfig
from svg_datauri_icons.utils import file_utils
from svg_datauri_icons.utils.early_error_handler import handle_startup_error
from svg_datauri_icons.utils.logging import setup_logging

LOGGER_NAME = "svg_datauri_icons"


def load_config(config_path: Path | None) -> AppConfig:
    """Load the application configuration.

    Args:
        config_path: YAML configuration file, or None for the defaults.

    Returns:
        The configuration.

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        InvalidConfigError: If the file cannot be read, parsed or validated.
    """
    if config_path is None:
        return AppConfig()

    if not file_utils.file_exists(config_path):
        raise ConfigFileNotFoundError("Configuration file not found", {"path": str(config_path)})

    try:
        return AppConfig.from_yaml(config_path)
    except (OSError, UnicodeDecodeError) as e:
        raise chain_exception(
            InvalidConfigError("Configuration file could not be read", {"path": str(config_path), "error": str(e)}),
            e,
        )
    except (yaml.YAMLError, ValidationError) as e:
        raise chain_exception(
            InvalidConfigError("Invalid configuration file", {"path": str(config_path), "error": str(e)}),
            e,
        )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="svg-datauri-icons",
        description="Render color-parameterized SVG icons as CSS data URIs",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to YAML configuration file")
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="Generated icon manifest (default: the 'manifest' config value)",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Fail on unknown icons or colors instead of warning"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Render a stylesheet template")
    build.add_argument("template", type=Path, help="Jinja2 stylesheet template")
    build.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")

    list_cmd = subparsers.add_parser("list", help="List registered icon names")
    list_cmd.add_argument("--folder", default=None, help="Only icons in this folder")

    render = subparsers.add_parser("render", help="Print the value for one icon")
    render.add_argument("icon", help="Registered icon key")
    render.add_argument("--color", default=None, help="Tint for fill and stroke")
    render.add_argument("--fill", default=None, help="Fill tint")
    render.add_argument("--stroke", default=None, help="Stroke tint")
    render.add_argument("--opacity", type=float, default=1, help="Icon opacity (default: 1)")
    render.add_argument("--bare", action="store_true", help="Print the data URI without url(...)")

    return parser


def _run_command(args: argparse.Namespace, config: AppConfig, registry: IconRegistry) -> int:
    if args.command == "list":
        for name in registry.list_icons(args.folder):
            print(name)
        return 0

    if args.command == "render":
        value = IconRenderer(registry, config.icons).render(
            args.icon,
            color=args.color,
            fill_color=args.fill,
            stroke_color=args.stroke,
            opacity=args.opacity,
            as_url=False if args.bare else None,
        )
        if value is None:
            return 1
        print(value)
        return 0

    template_path: Path = args.template
    stylesheet = StylesheetRenderer(config, registry, template_path.parent)
    if args.output:
        stylesheet.write_stylesheet(template_path.name, args.output)
    else:
        sys.stdout.write(stylesheet.render_template(template_path.name))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the command line tool.

    Args:
        argv: Arguments, defaulting to ``sys.argv[1:]``.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except IconStylesError as e:
        handle_startup_error(type(e).__name__, e.message, e.details)
        return 1

    if args.strict:
        config.icons = config.icons.model_copy(update={"strict": True})

    # Must precede manifest loading for registry debug output
    logger = setup_logging(config.logging, LOGGER_NAME)
    if args.debug or config.debug:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)

    try:
        manifest = args.manifest or config.manifest
        if manifest is None:
            raise InvalidConfigError("No icon manifest given", {"hint": "use --manifest or set 'manifest'"})
        registry = IconRegistry.from_manifest_file(manifest)
    except IconStylesError as e:
        handle_startup_error(type(e).__name__, e.message, e.details)
        return 1

    try:
        return _run_command(args, config, registry)
    except IconStylesError as e:
        logger.error(str(e))
        return 1
    except jinja2.TemplateError as e:
        logger.error(f"Stylesheet template failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
