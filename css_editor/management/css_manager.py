#!/usr/bin/env python3
"""CSS Editor Management CLI

Command-line utility to inspect and edit per-theme CSS config records and to
generate or regenerate the theme stylesheets they describe.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from css_editor.config import Config
from css_editor.config_docs import get_config_summary, validate_configuration
from css_editor.config_store import ConfigStoreBase, YamlConfigStore
from css_editor.exceptions import ConfigSaveError, ConfigurationError
from css_editor.file_system import LocalFileSystem
from css_editor.logger import Logger, session_logger
from css_editor.themes import BatchRegenerator, ThemeCssConfig, ThemeCssWriter


def resolve_config_dir(cli_dir: Optional[str]) -> str:
    """Resolve config directory from CLI or Config defaults."""
    if cli_dir:
        return cli_dir
    return str(Config.get_config_dir())


def resolve_public_dir(cli_dir: Optional[str]) -> str:
    """Resolve public:// root from CLI or Config defaults."""
    if cli_dir:
        return cli_dir
    return str(Config.get_public_dir())


def build_services(args) -> Tuple[ConfigStoreBase, ThemeCssWriter]:
    logger: Logger = session_logger
    store = YamlConfigStore(resolve_config_dir(args.config_dir), logger=logger)
    file_system = LocalFileSystem(
        schemes={
            "public": resolve_public_dir(args.public_dir),
            "private": str(Config.get_private_dir()),
        },
        logger=logger,
    )
    return store, ThemeCssWriter(store, file_system, logger=logger)


def list_themes(args):
    """List configured themes"""
    logger: Logger = session_logger

    try:
        store, writer = build_services(args)
        themes = BatchRegenerator(writer, store).list_themes()

        if not themes:
            logger.info("No themes configured.")
            return 0

        logger.info(f"{len(themes)} Theme(s) Configured:")

        if args.verbose:
            logger.info(f"{'Theme':<25} {'Enabled':<8} {'CSS (bytes)':<12} {'Path'}")
            logger.info("-" * 90)

        for theme in themes:
            if not args.verbose:
                logger.info(theme)
                continue
            settings = ThemeCssConfig.from_record(store.get(writer.config_name(theme)))
            logger.info(
                f"{theme:<25} {'yes' if settings.enabled else 'no':<8} "
                f"{len(settings.css.encode('utf-8')):<12} {settings.path or 'N/A'}"
            )

        return 0

    except Exception as e:
        logger.error(f"Error listing themes: {str(e)}")
        return 1


def show_theme(args):
    """Show a theme config record"""
    logger: Logger = session_logger

    try:
        store, writer = build_services(args)
        record = store.get(writer.config_name(args.theme))
        if record.is_new():
            logger.info(f"Theme '{args.theme}' has no CSS editor config.")
            return 1

        logger.info(json.dumps(record.as_dict(), indent=2, default=str))
        return 0

    except Exception as e:
        logger.error(f"Error showing theme: {str(e)}")
        return 1


def set_theme(args):
    """Edit a theme config record"""
    logger: Logger = session_logger

    if args.css is not None and args.css_file is not None:
        logger.error("Use either --css or --css-file, not both")
        return 1

    try:
        store, writer = build_services(args)
        record = store.get_editable(writer.config_name(args.theme))

        if args.css is not None:
            record.set("css", args.css)
        elif args.css_file is not None:
            record.set("css", Path(args.css_file).read_text(encoding="utf-8"))

        if args.enable:
            record.set("enabled", True)
        elif args.disable:
            record.set("enabled", False)

        record.save()
        logger.info(f"Theme '{args.theme}' config saved")
        return 0

    except (OSError, ConfigSaveError) as e:
        logger.error(f"Error saving theme config: {str(e)}")
        return 1


def generate_theme(args):
    """Generate the CSS file for one theme"""
    logger: Logger = session_logger

    _, writer = build_services(args)
    result = writer.generate_result(args.theme)

    if result.success:
        logger.info(f"Generated {result.path}")
        return 0

    logger.warning(f"CSS not generated for '{args.theme}': {result.status.value}")
    return 1


def regenerate_all(args):
    """Regenerate CSS files for every configured theme"""
    logger: Logger = session_logger

    store, writer = build_services(args)
    report = BatchRegenerator(writer, store).run()

    if args.verbose:
        for theme, result in report.results.items():
            logger.info(f"{theme:<25} {result.status.value}")

    logger.info(f"Regeneration completed: {report.generated_count} CSS file(s) generated")
    return 1 if report.failed else 0


def show_config(args):
    """Show effective configuration and validation result"""
    logger: Logger = session_logger

    logger.info(json.dumps(get_config_summary(), indent=2))
    is_valid, errors = validate_configuration()
    if is_valid:
        logger.info("Configuration is valid")
        return 0

    for error in errors:
        logger.error(error)
    return 1


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="css-editor Manager - Manage per-theme CSS and generated stylesheets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m css_editor.management.css_manager set basic --css "body{color:red}" --enable
  python -m css_editor.management.css_manager set basic --css-file basic.css
  python -m css_editor.management.css_manager generate basic
  python -m css_editor.management.css_manager regenerate --verbose
  python -m css_editor.management.css_manager list --verbose

Environment Variables:
    CSS_EDITOR_DATA_DIR     Data root directory (contains public/, private/, config/)
    CSS_EDITOR_CONFIG_DIR   Config record directory
    CSS_EDITOR_PUBLIC_DIR   Root of public:// files
        """,
    )

    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Config record directory (default: CSS_EDITOR_CONFIG_DIR or data/config)",
    )
    parser.add_argument(
        "--public-dir",
        type=str,
        default=None,
        help="Root directory for public:// files (default: CSS_EDITOR_PUBLIC_DIR or data/public)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    list_parser = subparsers.add_parser("list", help="List configured themes")
    list_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show enabled state, CSS size and generated path",
    )

    show_parser = subparsers.add_parser("show", help="Show a theme config record")
    show_parser.add_argument("theme", help="Theme machine name")

    set_parser = subparsers.add_parser("set", help="Edit a theme config record")
    set_parser.add_argument("theme", help="Theme machine name")
    set_parser.add_argument("--css", type=str, default=None, help="CSS text")
    set_parser.add_argument("--css-file", type=str, default=None, help="Read CSS text from file")
    toggle = set_parser.add_mutually_exclusive_group()
    toggle.add_argument("--enable", action="store_true", help="Enable CSS generation")
    toggle.add_argument("--disable", action="store_true", help="Disable CSS generation")

    generate_parser = subparsers.add_parser("generate", help="Generate CSS file for a theme")
    generate_parser.add_argument("theme", help="Theme machine name")

    regenerate_parser = subparsers.add_parser(
        "regenerate", help="Regenerate CSS files for all configured themes"
    )
    regenerate_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show the outcome for each theme",
    )

    subparsers.add_parser("config", help="Show effective configuration")

    args = parser.parse_args(argv)

    try:
        logging.getLogger(session_logger.name).setLevel(Config.get_log_level())
    except ConfigurationError as e:
        session_logger.warning(f"Ignoring log level: {str(e)}")

    if not args.command:
        parser.print_help()
        return 1

    handlers = {
        "list": list_themes,
        "show": show_theme,
        "set": set_theme,
        "generate": generate_theme,
        "regenerate": regenerate_all,
        "config": show_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
