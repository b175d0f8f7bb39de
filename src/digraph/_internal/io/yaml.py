# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""A YAML loader for graph specs that supports the !from include directive.

`!from other.yaml` is replaced by the contents of `other.yaml`, resolved
relative to the including file. Indices may select part of the included file,
e.g. `!from shared.yaml['edges'][0]`, which lets several graph specs share one
vertex count or one list of edges.
"""
import re
from pathlib import Path
from typing import IO, Any

import yaml

_INDEXED_PATH_RE = re.compile(
    r'^([^\[]+)((?:\[(?:\d+|(?:\'[^\']+\')|(?:"[^"]+"))\])*)$'
)
_INDEX_RE = re.compile(r'\[(\d+|\'[^\']+\'|"[^"]+")\]')


def _parse_include_path(path: str) -> tuple[Path, list[int | str]]:
    """Split an include path into the file path and the indices to select."""
    match = _INDEXED_PATH_RE.match(path.strip())
    if not match:
        raise yaml.YAMLError(f"Invalid include path: {path}")
    file_path, selection = match.groups()
    indices: list[int | str] = [
        int(idx) if idx.isdigit() else idx.strip("'\"")
        for idx in _INDEX_RE.findall(selection)
    ]
    return Path(file_path), indices


def _include_handler(loader: "_YamlIncludeLoader", node: yaml.Node) -> Any:
    """YAML !from handler that loads (part of) another YAML file."""
    if not isinstance(node, yaml.ScalarNode):
        raise yaml.YAMLError(f"Unsupported node type for !from: {type(node)}")
    file_path, indices = _parse_include_path(loader.construct_scalar(node))
    if not file_path.is_absolute():
        file_path = loader.base_path / file_path
    included = read_extended_yaml_file(file_path)
    for index in indices:
        if isinstance(included, list) and isinstance(index, int):
            included = included[index]
        elif isinstance(included, dict) and isinstance(index, str):
            included = included[index]
        else:
            raise yaml.YAMLError(f"Invalid index {index} for included file: {file_path}")
    return included


class _YamlIncludeLoader(yaml.SafeLoader):
    """Safe YAML loader that also understands the !from directive."""

    def __init__(self, stream: IO[str]):
        """Initialize the loader with the directory of `stream` as base path."""
        super().__init__(stream)
        self._base_path = (
            Path(stream.name).parent if hasattr(stream, "name") else Path.cwd()
        )

    @property
    def base_path(self) -> Path:
        """Get the base path for file includes."""
        return self._base_path


_YamlIncludeLoader.add_constructor("!from", _include_handler)


def read_extended_yaml_file(file_path: Path) -> Any:
    """Read a YAML file with support for !from directives."""
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file '{file_path}' does not exist.")
    with open(file_path, "r", encoding="utf-8") as file:
        return yaml.load(stream=file, Loader=_YamlIncludeLoader)
