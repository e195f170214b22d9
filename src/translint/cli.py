import logging
import os
import sys
from typing import Any

import yaml

import click
from translint import parser
from translint.classes import TranslintError
from translint.placeholders import DEFAULT_MARKER

logger = logging.getLogger(__name__)

DEFAULT_LOGGING = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "datefmt": "%Y-%m-%d %H:%M:%S",
}


def load_config(config_file_path: str) -> dict[str, Any]:
    try:
        with open(config_file_path, "r") as file:
            return yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.warning(f"Config file {config_file_path} not found, using defaults.")
        return {}


@click.group()
@click.version_option()
def cli() -> None:
    pass


@cli.command("check")
@click.argument(
    "translation_folder", type=click.Path(exists=True, file_okay=False)
)
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--reference", default=None, help="Reference language code.")
@click.option("--marker", default=None, help="Placeholder delimiter character.")
def check(
    translation_folder: str,
    config_folder: str,
    reference: str | None,
    marker: str | None,
) -> None:
    config_file_path = os.path.abspath(os.path.join(config_folder, "config.yml"))

    try:
        config = load_config(config_file_path)
    except yaml.YAMLError as exc:
        logger.error(f"Invalid config file {config_file_path}: {exc}")
        sys.exit(1)

    logging_cfg = {**DEFAULT_LOGGING, **(config.get("logging") or {})}
    logging.basicConfig(
        level=logging.getLevelName(logging_cfg["level"]),
        format=logging_cfg["format"],
        datefmt=logging_cfg["datefmt"],
    )

    check_cfg = config.get("check") or {}
    if reference is None:
        reference = check_cfg.get("reference", parser.DEFAULT_REFERENCE)
    if marker is None:
        marker = check_cfg.get("marker", DEFAULT_MARKER)
    try:
        status = parser.run(
            translation_folder_path=os.path.abspath(translation_folder),
            reference=reference,
            marker=marker,
            pattern=check_cfg.get("pattern", parser.DEFAULT_PATTERN),
        )
    except TranslintError as exc:
        logger.error(str(exc))
        sys.exit(1)
    sys.exit(status)
