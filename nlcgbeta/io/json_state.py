"""JSON encoding of beta-update strategies for solver checkpoints.

Strategies are stateless, so only the type tag is written. Decoding returns
a fresh instance equal to the one that was encoded.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from nlcgbeta.beta import BetaUpdate
from nlcgbeta.beta.core import lookup_beta_update

from .schema import SCHEMA_VERSION, validate_beta_update_dict


def beta_update_to_dict(strategy: BetaUpdate) -> Dict[str, Any]:
    """
    Encode a strategy as a JSON-compatible dictionary.

    Raises
    ------
    ValueError
        If ``strategy`` is not a BetaUpdate instance.
    """
    if not isinstance(strategy, BetaUpdate):
        raise ValueError(
            f"Expected a BetaUpdate instance, got {type(strategy).__name__}."
        )
    return {"version": SCHEMA_VERSION, "type": strategy.name}


def beta_update_from_dict(obj: dict) -> BetaUpdate:
    """Decode a dictionary produced by :func:`beta_update_to_dict`."""
    validate_beta_update_dict(obj)
    return lookup_beta_update(obj["type"])()


def beta_update_to_json(strategy: BetaUpdate) -> str:
    return json.dumps(beta_update_to_dict(strategy), sort_keys=True)


def beta_update_from_json(text: str) -> BetaUpdate:
    """
    Decode a JSON string produced by :func:`beta_update_to_json`.

    Raises
    ------
    ValueError
        If the text is not valid JSON or does not match the schema.
    """
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON for beta update: {e}") from e
    return beta_update_from_dict(obj)


def dump_beta_update(strategy: BetaUpdate, path: str) -> None:
    """Write a strategy to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(beta_update_to_dict(strategy), f, indent=2)


def load_beta_update(path: str) -> BetaUpdate:
    """
    Load a strategy from a JSON file.

    Raises
    ------
    ValueError
        If the file content is invalid.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Beta update file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    return beta_update_from_dict(obj)


__all__ = [
    "beta_update_from_dict",
    "beta_update_from_json",
    "beta_update_to_dict",
    "beta_update_to_json",
    "dump_beta_update",
    "load_beta_update",
]
