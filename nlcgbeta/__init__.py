"""nlcgbeta - beta-update strategies for Nonlinear Conjugate Gradient."""

__version__ = "0.1.0"

# Vector capabilities
from .math import (
    CapabilityError,
    DimensionMismatchError,
    NlcgBetaError,
    SupportsDot,
    SupportsNorm,
    SupportsSub,
    dot,
    norm,
    sub,
)

# Strategies
from .beta import (
    BetaConfig,
    BetaUpdate,
    FletcherReeves,
    HestenesStiefel,
    PolakRibiere,
    PolakRibierePlus,
    available_beta_updates,
    create_beta_update,
    register_beta_update,
)

# Serialization
from .io import (
    beta_update_from_dict,
    beta_update_from_json,
    beta_update_to_dict,
    beta_update_to_json,
    dump_beta_update,
    load_beta_update,
)

# Debug mode and logging
from .debug import debug_context, is_debug_enabled, set_debug_enabled
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    "BetaConfig",
    "BetaUpdate",
    "CapabilityError",
    "DimensionMismatchError",
    "FletcherReeves",
    "HestenesStiefel",
    "NlcgBetaError",
    "PolakRibiere",
    "PolakRibierePlus",
    "SupportsDot",
    "SupportsNorm",
    "SupportsSub",
    "available_beta_updates",
    "beta_update_from_dict",
    "beta_update_from_json",
    "beta_update_to_dict",
    "beta_update_to_json",
    "configure_logging",
    "create_beta_update",
    "debug_context",
    "dot",
    "dump_beta_update",
    "get_logger",
    "is_debug_enabled",
    "load_beta_update",
    "norm",
    "register_beta_update",
    "set_debug_enabled",
    "set_log_level",
    "sub",
]
