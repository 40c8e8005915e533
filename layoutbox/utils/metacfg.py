# -*- coding: utf-8 -*-
# File: metacfg.py

# Copyright 2024 Dr. Janis Meyer. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Nested attribute configs (`AttrDict`) and their `.yaml` persistence
"""
from __future__ import annotations

import ast
import pprint
from typing import Any

import yaml

from .types import PathLikeOrStr

__all__ = ["AttrDict", "set_config_by_yaml", "save_config_to_yaml"]


def _parse_arg(arg: str) -> tuple[list[str], str]:
    if "=" not in arg:
        raise ValueError(f"Config args must have the form key1.key2=value, got: {arg}")
    keys, value = arg.split("=", maxsplit=1)
    return keys.strip().split("."), value.strip()


# Copyright (c) Tensorpack Contributors
# Licensed under the Apache License, Version 2.0 (the "License")
class AttrDict:
    """
    Config with nested levels accessible as attributes, e.g. `cfg.HANDLE_OVERLAPS.RANGE`.

    Reading a missing attribute of an unfrozen instance adds an empty sub-level. A frozen instance rejects new
    levels as well as new values.
    """

    _frozen = False

    def __getattr__(self, name: str) -> Any:
        # private names must not create levels, copy and pickle look them up
        if self._frozen or name.startswith("_"):
            raise AttributeError(name)
        level = AttrDict()
        setattr(self, name, level)
        return level

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "_frozen" and self._frozen:
            raise AttributeError(f"Config is frozen, cannot set: {name}")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return pprint.pformat(self.to_dict(), width=100, compact=True)

    __repr__ = __str__

    def __eq__(self, _: Any) -> bool:
        raise NotImplementedError("AttrDict instances cannot be compared, compare to_dict() instead")

    def __ne__(self, _: Any) -> bool:
        raise NotImplementedError("AttrDict instances cannot be compared, compare to_dict() instead")

    def _public_items(self) -> list[tuple[str, Any]]:
        return [(key, value) for key, value in vars(self).items() if not key.startswith("_")]

    def _get_level(self, keys: list[str], arg: str) -> AttrDict:
        level = self
        for key in keys:
            value = vars(level).get(key)
            if not isinstance(value, AttrDict):
                raise KeyError(f"Unknown config key: {arg}")
            level = value
        return level

    def to_dict(self) -> dict[str, Any]:
        """Nested dict of all values"""
        return {key: value.to_dict() if isinstance(value, AttrDict) else value for key, value in self._public_items()}

    def from_dict(self, d: dict[str, Any]) -> None:  # pylint: disable=C0103
        """
        Add or overwrite values from a nested dict. The instance gets unfrozen.
        """
        if not isinstance(d, dict):
            return
        self.freeze(False)
        for key, value in d.items():
            if isinstance(value, dict):
                getattr(self, key).from_dict(value)
            else:
                setattr(self, key, value)

    def update_args(self, args: list[str]) -> None:
        """
        Overwrite existing values with command line style arguments.

        Example:
            ```python
            cfg.update_args(["HANDLE_OVERLAPS.RANGE=20", "USE_COMBINE_OVERLAPS=False"])
            ```

        Args:
            args: Arguments `key1.key2=value`. If the current value is not a string, `value` is parsed as Python
                  literal.

        Raises:
            KeyError: If a key does not exist
        """
        for arg in args:
            keys, value = _parse_arg(arg)
            level = self._get_level(keys[:-1], arg)
            if keys[-1] not in vars(level):
                raise KeyError(f"Unknown config key: {arg}")
            if not isinstance(getattr(level, keys[-1]), str):
                value = ast.literal_eval(value)
            setattr(level, keys[-1], value)

    def overwrite_config(self, other_config: AttrDict) -> None:
        """
        Take over all values of `other_config`.

        Raises:
            AttributeError: If the instance is frozen
        """
        if self._frozen:
            raise AttributeError("Config is frozen, cannot overwrite it")
        self.from_dict(other_config.to_dict())

    def freeze(self, freezed: bool = True) -> None:
        """Freeze (or unfreeze with `freezed=False`) this instance and all sub-levels"""
        self._frozen = freezed
        for _, value in self._public_items():
            if isinstance(value, AttrDict):
                value.freeze(freezed)


def set_config_by_yaml(path_yaml: PathLikeOrStr) -> AttrDict:
    """
    Load a `.yaml` file into a frozen `AttrDict`
    """
    with open(path_yaml, "r", encoding="utf-8") as file:
        content = yaml.safe_load(file)
    config = AttrDict()
    config.from_dict(content or {})
    config.freeze()
    return config


def save_config_to_yaml(config: AttrDict, path_yaml: PathLikeOrStr) -> None:
    """
    Write the values of `config` to a `.yaml` file

    Args:
        config: Config to save
        path_yaml: Target file
    """
    with open(path_yaml, "w", encoding="utf-8") as file:
        yaml.safe_dump(config.to_dict(), file, sort_keys=False)
