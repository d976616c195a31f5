"""Configuration resolution for numfield.

Priority order (highest to lowest):
1. Command-line flags (--decimals, --significant-digits, ...)
2. The file named by the NUMFIELD_CONFIG environment variable, or
   ~/.config/numfield/config.toml
3. Built-in defaults of each options record

Example config.toml::

    [float]
    decimals = 2
    thousand_sep = " "
    decimal_point = ","

    [percent]
    decimals = 1

    [si]
    significant_digits = 4
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

from numfield.errors import OptionsError
from numfield.options import FloatFormatOptions, PercentFormatOptions, SiFormatOptions

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "numfield" / "config.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

OptionsT = TypeVar("OptionsT")


@dataclass(frozen=True)
class FieldOptions:
    """Format options for each kind of field in the app."""

    float_format: FloatFormatOptions = field(default_factory=FloatFormatOptions)
    percent_format: PercentFormatOptions = field(default_factory=PercentFormatOptions)
    si_format: SiFormatOptions = field(default_factory=SiFormatOptions)


def config_path() -> Path:
    """Return the config file location, honouring NUMFIELD_CONFIG."""
    env_file = os.environ.get("NUMFIELD_CONFIG")
    if env_file:
        return Path(env_file).expanduser()
    return _CONFIG_PATH


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return an empty dict on failure."""
    path = config_path()
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Could not read %s, using defaults: %s", path, exc)
        return {}
    logger.debug("Loaded config from %s", path)
    return data


def _section(data: dict, name: str) -> dict:
    """Return one table of the config, or an empty dict if it is missing or malformed."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring [%s]: expected a table, got %r", name, section)
        return {}
    return section


def _build_options(cls: type[OptionsT], name: str, values: dict) -> OptionsT:
    """Build an options record from a config table, falling back to defaults.

    Unknown keys are dropped; if the remaining values are invalid the whole
    table is ignored.
    """
    known = {f.name for f in dataclasses.fields(cls)}
    for key in sorted(set(values) - known):
        logger.warning("Ignoring unknown key %r in [%s]", key, name)
    kwargs = {k: v for k, v in values.items() if k in known}
    try:
        return cls(**kwargs)
    except OptionsError as exc:
        logger.warning("Invalid [%s] options, using defaults: %s", name, exc)
        return cls()


def load_float_options(data: dict | None = None) -> FloatFormatOptions:
    """Load plain decimal format options from the ``[float]`` table.

    Args:
        data: An already loaded config dict. Read from disk when omitted.
    """
    if data is None:
        data = _load_config_dict()
    return _build_options(FloatFormatOptions, "float", _section(data, "float"))


def load_percent_options(data: dict | None = None) -> PercentFormatOptions:
    """Load percentage format options from the ``[percent]`` table."""
    if data is None:
        data = _load_config_dict()
    return _build_options(PercentFormatOptions, "percent", _section(data, "percent"))


def load_si_options(data: dict | None = None) -> SiFormatOptions:
    """Load SI format options from the ``[si]`` table."""
    if data is None:
        data = _load_config_dict()
    return _build_options(SiFormatOptions, "si", _section(data, "si"))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace; flags that were not given are ``None``.
    """
    parser = argparse.ArgumentParser(
        prog="numfield",
        description="Try out formatted numeric input fields in the terminal.",
    )
    parser.add_argument("--decimals", type=int, default=None, help="Fractional digits of plain numbers.")
    parser.add_argument("--thousand-sep", default=None, help="Separator between digit groups.")
    parser.add_argument("--decimal-point", default=None, help="Decimal point used when formatting.")
    parser.add_argument(
        "--explicit-plus",
        action="store_true",
        default=None,
        help="Show a '+' in front of positive plain numbers.",
    )
    parser.add_argument(
        "--percent-decimals", type=int, default=None, help="Fractional digits of percentages."
    )
    parser.add_argument(
        "--significant-digits",
        type=int,
        default=None,
        help="Significant digits of SI-prefixed numbers.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Minimum level of log records sent to the Textual console.",
    )
    return parser.parse_args(argv)


def _override(options: OptionsT, **values) -> OptionsT:
    changes = {k: v for k, v in values.items() if v is not None}
    if not changes:
        return options
    return dataclasses.replace(options, **changes)


def resolve_options(args: argparse.Namespace | None = None) -> FieldOptions:
    """Combine the config file with command-line overrides.

    Args:
        args: Parsed command-line arguments, if any.

    Returns:
        The format options for every field.

    Raises:
        SystemExit: If a command-line flag holds an invalid value.
    """
    data = _load_config_dict()
    options = FieldOptions(
        float_format=load_float_options(data),
        percent_format=load_percent_options(data),
        si_format=load_si_options(data),
    )
    if args is None:
        return options

    try:
        return FieldOptions(
            float_format=_override(
                options.float_format,
                decimals=args.decimals,
                thousand_sep=args.thousand_sep,
                decimal_point=args.decimal_point,
                explicit_plus=args.explicit_plus,
            ),
            percent_format=_override(options.percent_format, decimals=args.percent_decimals),
            si_format=_override(options.si_format, significant_digits=args.significant_digits),
        )
    except OptionsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
