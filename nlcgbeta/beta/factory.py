"""Factory for selecting a beta-update strategy from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from . import methods  # noqa: F401  (registers the built-in strategies)
from .core import BetaUpdate, lookup_beta_update, registered_beta_updates


@dataclass(frozen=True)
class BetaConfig:
    """
    Configuration naming the beta formula an NLCG solver should use.

    Args:
        name: Type tag (``"PolakRibierePlus"``) or alias (``"pr+"``,
            ``"polak_ribiere_plus"``). Matching ignores case, ``-``, ``_``
            and whitespace.
    """

    name: str = "PolakRibierePlus"


def create_beta_update(config: Union[BetaConfig, str]) -> BetaUpdate:
    """
    Create a beta-update strategy from a configuration or a bare name.

    Args:
        config: A :class:`BetaConfig` or the strategy name.

    Returns:
        A new (stateless) strategy instance.

    Raises:
        ValueError: If the name does not match any registered strategy.
        TypeError: If the name is not a string.
    """
    name = config.name if isinstance(config, BetaConfig) else config
    if not isinstance(name, str):
        raise TypeError(f"Beta update name must be a string, got {type(name).__name__}.")
    return lookup_beta_update(name)()


def available_beta_updates() -> List[str]:
    """Return the type tags of all registered strategies."""
    return registered_beta_updates()


__all__ = ["BetaConfig", "available_beta_updates", "create_beta_update"]
