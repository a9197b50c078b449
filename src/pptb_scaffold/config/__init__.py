"""Configuration, identifier validation and preflight checks."""

from pptb_scaffold.config.loader import (
    home_config_exists,
    load_config,
    local_config_exists,
)
from pptb_scaffold.config.schema import (
    DEFAULT_CONFIG,
    ScaffoldConfig,
    ToolConfig,
    ToolConfigBuilder,
)
from pptb_scaffold.config.validation import (
    EmptyIdentifierError,
    InvalidCharactersError,
    InvalidIdentifierError,
    check_identifier,
    derive_identifier,
    validate_identifier,
)

__all__ = [
    "DEFAULT_CONFIG",
    "EmptyIdentifierError",
    "InvalidCharactersError",
    "InvalidIdentifierError",
    "ScaffoldConfig",
    "ToolConfig",
    "ToolConfigBuilder",
    "check_identifier",
    "derive_identifier",
    "home_config_exists",
    "load_config",
    "local_config_exists",
    "validate_identifier",
]
