"""Environment variable override for the config location."""

import os
from typing import Optional
from ..utils.casing import screaming_snake_case
from ..utils.logging import get_logger

logger = get_logger("config.environment")

OVERRIDE_SUFFIX = "_CONFIG"


def override_env_var(name: str) -> str:
    """
    Name of the variable that overrides the config location.
    
    ``"my-app"`` -> ``"MY_APP_CONFIG"``.
    """
    return f"{screaming_snake_case(name)}{OVERRIDE_SUFFIX}"


def get_override_path(name: str) -> Optional[str]:
    """
    Read the override variable for ``name``.
    
    Returns:
        The raw (unexpanded) path, or None if the variable is unset or empty
    """
    var = override_env_var(name)
    value = os.environ.get(var)
    if not value:
        return None
    logger.debug(f"{var} is set to {value}")
    return value
