"""Load Forthy configuration"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import toml

from .config_classes import ReplConfig
from .exceptions import UserResolvableError

LOG = logging.getLogger(__name__)

FORTHY_DIST_DATA = Path(__file__).parent / "dist_data"
DEFAULT_CONFIG_FILEPATH = Path("forthy.toml")


class ConfigError(UserResolvableError):
    """Error loading configuration"""


@dataclass
class Config:
    config_file: Union[Path, None]
    repl: ReplConfig = field(default_factory=ReplConfig)


def load(args: dict) -> Config:
    """Load the configuration

    A missing default config file just means "use the defaults"; a missing
    file that was asked for explicitly is an error.
    """
    if args.get("--config"):
        config_file = Path(args["--config"])
        explicit = True
    else:
        config_file = DEFAULT_CONFIG_FILEPATH
        explicit = False

    try:
        data = toml.load(config_file)
    except FileNotFoundError:
        if explicit:
            raise ConfigError(
                f"{config_file} not found",
                "Either create it manually, or use `forthy init' to generate a new one.",
            )
        LOG.info("No %s, using defaults", config_file)
        return Config(config_file=None)
    except toml.TomlDecodeError as exc:
        raise ConfigError(f"Can't parse {config_file}", str(exc))

    try:
        repl_config = ReplConfig(**data.pop("repl", {}))
    except TypeError as exc:
        raise ConfigError(
            f"Bad [repl] section in {config_file}",
            f"{exc}. Valid keys: prompt, banner, show_stack, prelude.",
        )

    if data:
        LOG.warning("Ignoring unknown sections in %s: %s", config_file, list(data))

    LOG.info("Loaded %s", config_file)
    return Config(config_file=config_file, repl=repl_config)


def create_skeleton(dest="."):
    """Create a skeleton (template) config file in the given dir"""
    filename = Path(dest) / DEFAULT_CONFIG_FILEPATH
    if filename.exists():
        raise UserResolvableError(
            f"{filename} already exists", "Cowardly refusing to clobber it...",
        )
    shutil.copyfile(FORTHY_DIST_DATA / DEFAULT_CONFIG_FILEPATH, filename)
    return filename
