"""Serialization of beta-update strategy selection."""

from .json_state import (
    beta_update_from_dict,
    beta_update_from_json,
    beta_update_to_dict,
    beta_update_to_json,
    dump_beta_update,
    load_beta_update,
)
from .schema import SCHEMA_VERSION, beta_update_schema, validate_beta_update_dict

__all__ = [
    "SCHEMA_VERSION",
    "beta_update_from_dict",
    "beta_update_from_json",
    "beta_update_schema",
    "beta_update_to_dict",
    "beta_update_to_json",
    "dump_beta_update",
    "load_beta_update",
    "validate_beta_update_dict",
]
