"""pars_validator: validation and normalization of Iranian identity, banking and contact data."""

__version__ = "0.1.0"

from .config import GroupingOptions, ParsValidatorConfig, PasswordPolicy, load_config
from .errors import DataPackError, InvalidArgumentError
from .registry import Bank, MobileOperator
from .text import *  # noqa: F401,F403
from .text import __all__ as _text_all
from .validators import *  # noqa: F401,F403
from .validators import __all__ as _validators_all

__all__ = [
    "__version__",
    "GroupingOptions",
    "ParsValidatorConfig",
    "PasswordPolicy",
    "load_config",
    "DataPackError",
    "InvalidArgumentError",
    "Bank",
    "MobileOperator",
    *_text_all,
    *_validators_all,
]
