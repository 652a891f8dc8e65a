#!/usr/bin/env python3
"""
Print a greeting a configurable number of times.

The first run writes the default configuration; edit it and run again.

Usage:
  python scripts/helloworld.py
  python scripts/helloworld.py --config ./Config.toml
"""

from __future__ import annotations

import argparse
import json
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

import graze

logger = logging.getLogger("helloworld")


@dataclass
class Config:
    message: str = "Hello, world!"
    amount: int = 3


def toml_string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic-string escapes.
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def to_toml(cfg: Config) -> str:
    return f"message = {toml_string(cfg.message)}\namount = {cfg.amount}\n"


def from_toml(text: str) -> Config:
    return Config(**tomllib.loads(text))


def load_config(path: Path) -> Config:
    return graze.load_or_write_default(
        path,
        from_toml,
        to_toml,
        Config,
        create_parents=True,
    )


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--config",
        type=Path,
        default=graze.user_config_file("helloworld"),
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except graze.ConfigurationError as e:
        logger.error("An error occurred while loading the configuration")
        logger.error("%s", e)
        return 1

    for _ in range(config.amount):
        print(config.message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
