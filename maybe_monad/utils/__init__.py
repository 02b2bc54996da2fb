"""
Utilities module for maybe-monad.

Configuration, logging, error types and callable introspection shared by the
monad modules.
"""

# Re-export the configuration manager for easy imports
from maybe_monad.utils.config_manager import config, PackageConfig, get_debug_mode

__all__ = ["config", "PackageConfig", "get_debug_mode"]
