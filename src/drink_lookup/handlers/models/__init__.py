"""Configuration models for the lookup handler."""

from drink_lookup.handlers.models.env_vars import LookupHandlerEnvVars, get_handler_env_vars

__all__ = [
    "LookupHandlerEnvVars",
    "get_handler_env_vars",
]
