"""JSON schema for serialized beta-update strategies.

A strategy carries no fields, so its encoding is a unit structure holding
only a type tag:

    {
        "version": "nlcgbeta-json-1.0",
        "type": <string>          # e.g. "FletcherReeves"
    }
"""

from __future__ import annotations

from nlcgbeta.beta.core import registered_beta_updates

SCHEMA_VERSION = "nlcgbeta-json-1.0"


def beta_update_schema() -> dict:
    """
    Return the structural schema (as a Python dict) of the JSON encoding.

    Returns
    -------
    dict
        Field definitions and constraints.
    """
    return {
        "version": {
            "type": "string",
            "description": f"Schema version identifier, '{SCHEMA_VERSION}'",
            "required": True,
        },
        "type": {
            "type": "string",
            "description": "Strategy type tag",
            "required": True,
            "enum": registered_beta_updates(),
        },
    }


def validate_beta_update_dict(obj: dict) -> None:
    """
    Validate a decoded beta-update object against the schema.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("Serialized beta update must be a dictionary object.")

    if "version" not in obj:
        raise ValueError("Serialized beta update missing required field 'version'.")
    if obj["version"] != SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported version {obj['version']!r}, expected '{SCHEMA_VERSION}'."
        )

    if "type" not in obj:
        raise ValueError("Serialized beta update missing required field 'type'.")
    if not isinstance(obj["type"], str):
        raise ValueError("Field 'type' must be a string.")
    known = registered_beta_updates()
    if obj["type"] not in known:
        raise ValueError(
            f"Unknown beta update type {obj['type']!r}. Supported types: {known}."
        )

    extra = sorted(set(obj) - {"version", "type"})
    if extra:
        raise ValueError(f"Unexpected fields in serialized beta update: {extra}.")


__all__ = ["SCHEMA_VERSION", "beta_update_schema", "validate_beta_update_dict"]
