"""Common interface and registry for NLCG beta-update strategies."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Type, TypeVar

from nlcgbeta.debug import is_debug_enabled
from nlcgbeta.logging import get_logger
from nlcgbeta.math import is_finite

logger = get_logger(__name__)

_REGISTRY: Dict[str, Type["BetaUpdate"]] = {}
_ALIASES: Dict[str, str] = {}

B = TypeVar("B", bound=Type["BetaUpdate"])


class BetaUpdate(ABC):
    """
    Strategy computing the NLCG mixing coefficient beta.

    The outer solver forms the next search direction as
    ``p_{k+1} = -grad_{k+1} + beta * p_k``. Implementations are stateless, so
    a single instance may be shared by any number of concurrent solvers.

    A zero denominator is not an error: the IEEE-754 quotient (``inf`` or
    ``nan``) is returned. Callers must check ``numpy.isfinite(beta)`` and
    restart with steepest descent (or abort) when it fails.

    Attributes
    ----------
    name:
        Type tag used for configuration and serialization.
    aliases:
        Additional names accepted by :func:`nlcgbeta.beta.create_beta_update`.
    requires:
        Vector capabilities the strategy uses.
    """

    name: ClassVar[str] = ""
    aliases: ClassVar[tuple[str, ...]] = ()
    requires: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def compute(self, grad_prev: Any, grad_new: Any, dir_prev: Any) -> Any:
        """Evaluate the formula; see :meth:`update`."""

    def update(self, grad_prev: Any, grad_new: Any, dir_prev: Any) -> Any:
        """
        Return beta for one NLCG iteration.

        Parameters
        ----------
        grad_prev:
            Gradient at the previous iterate, ``grad f(x_k)``.
        grad_new:
            Gradient at the new iterate, ``grad f(x_{k+1})``.
        dir_prev:
            Previous search direction ``p_k``.

        Returns
        -------
        Scalar
            NumPy scalar for arrays and sequences, 0-d tensor for tensors.
        """
        beta = self.compute(grad_prev, grad_new, dir_prev)
        logger.debug("%s: beta=%s", self.name, beta)
        if is_debug_enabled() and not is_finite(beta):
            logger.warning(
                "%s produced non-finite beta=%s; caller should restart along "
                "the steepest-descent direction.",
                self.name,
                beta,
            )
        return beta

    def __call__(self, grad_prev: Any, grad_new: Any, dir_prev: Any) -> Any:
        return self.update(grad_prev, grad_new, dir_prev)


def normalize_name(name: str) -> str:
    """Lower-case ``name`` and drop separators (``-``, ``_``, whitespace)."""
    return re.sub(r"[\s_\-]+", "", name.strip().lower())


def register_beta_update(cls: B) -> B:
    """Class decorator adding a strategy to the name registry."""
    if not cls.name:
        raise ValueError(f"{cls.__name__} must define a non-empty 'name'.")
    if cls.name in _REGISTRY and _REGISTRY[cls.name] is not cls:
        raise ValueError(f"Beta update '{cls.name}' is already registered.")
    keys = [normalize_name(key) for key in (cls.name, *cls.aliases)]
    for key in keys:
        owner = _ALIASES.get(key)
        if owner is not None and owner != cls.name:
            raise ValueError(
                f"Name '{key}' of {cls.__name__} is already used by beta update '{owner}'."
            )
    _REGISTRY[cls.name] = cls
    for key in keys:
        _ALIASES[key] = cls.name
    return cls


def lookup_beta_update(name: str) -> Type[BetaUpdate]:
    """Resolve a type tag or alias to its strategy class."""
    tag = _ALIASES.get(normalize_name(name))
    if tag is None:
        raise ValueError(
            f"Unsupported beta update '{name}'. "
            f"Supported names: {registered_beta_updates()}"
        )
    return _REGISTRY[tag]


def registered_beta_updates() -> List[str]:
    return list(_REGISTRY)


__all__ = [
    "BetaUpdate",
    "lookup_beta_update",
    "normalize_name",
    "register_beta_update",
    "registered_beta_updates",
]
