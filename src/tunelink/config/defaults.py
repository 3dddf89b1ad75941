"""
Default configuration values for tunelink.

Note: Settings are resolved via config/loader.py which supports environment
variables (TUNELINK_PROVIDERS, TUNELINK_STRICT_HOST), project config, and
user config.
"""

# Providers registered by create_registry() when nothing is configured
DEFAULT_ENABLED_PROVIDERS: tuple[str, ...] = ("soundcloud",)

# Anchor provider checks to the URL host instead of a substring search
DEFAULT_STRICT_HOST = True

# Config file name, looked up in .tunelink/ (project) and the root dir (user)
CONFIG_FILENAME = "config.yaml"
