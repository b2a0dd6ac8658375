"""Miscellaneous utility functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


def assign(target: dict, *sources: Mapping[str, Any] | None) -> dict:
    """Copy the keys of each source onto the target, later sources winning.

    Values are replaced wholesale; nested mappings are not merged. Missing
    sources are ignored.
    """
    for source in sources:
        if source:
            target.update(source)
    return target


def dict_merge(target_dict: dict, input_dict: Mapping) -> None:
    """Merge the second dictionary onto the first."""
    for k in input_dict:
        if k in target_dict:
            if isinstance(target_dict[k], dict) and isinstance(input_dict[k], dict):
                dict_merge(target_dict[k], input_dict[k])
            elif isinstance(target_dict[k], list) and isinstance(input_dict[k], list):
                target_dict[k] = [*target_dict[k], *input_dict[k]]
            else:
                target_dict[k] = input_dict[k]
        else:
            target_dict[k] = input_dict[k]
