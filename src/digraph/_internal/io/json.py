# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for reading and writing JSON reports."""

from pathlib import Path
from typing import Any

import orjson

_DUMP_OPTIONS = (
    orjson.OPT_INDENT_2
    | orjson.OPT_SORT_KEYS
    | orjson.OPT_APPEND_NEWLINE
)


def read_json_file(file_path: Path) -> Any:
    """Reads a JSON file and returns the content."""
    if not file_path.exists():
        raise FileNotFoundError(f"File {file_path} does not exist.")
    with open(file_path, "rb") as file:
        return orjson.loads(file.read())


def dumps_json(obj: Any) -> str:
    """Serializes `obj` the same way `write_as_json` does, as a string."""
    return orjson.dumps(obj, option=_DUMP_OPTIONS).decode("utf-8")


def write_as_json(file_path: Path, obj: Any) -> None:
    """Writes `obj` to a file as a json record."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "wb") as file:
        file.write(orjson.dumps(obj, option=_DUMP_OPTIONS))
