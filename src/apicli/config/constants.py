"""Global constants for apicli."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

# Catalog locations (checked in order under the config directory)
CONFIG_DIR_NAME = ".apicli"
DEFAULT_CONFIG_DIR = Path.home() / CONFIG_DIR_NAME
TOML_CATALOG_NAME = "apicli.toml"
TXT_CATALOG_NAME = "apis.txt"
SETTINGS_FILE_NAME = "settings.toml"

# Environment variables read by the settings loader
ENV_PREFIX = "APICLI_"
SETTINGS_ENV_VAR = "APICLI_SETTINGS"

# Variable name fallbacks consulted when a direct lookup finds nothing
DEFAULT_ALIASES: Dict[str, List[str]] = {
    "API_KEY": ["OPENAI_API_KEY", "OPENROUTER_API_KEY", "CEREBRAS_API_KEY"],
    "OPENAI_API_KEY": ["API_KEY"],
    "OPENROUTER_API_KEY": ["API_KEY"],
    "CEREBRAS_API_KEY": ["API_KEY"],
}

# Header shorthand
BEARER_PREFIX = "BEARER "
JSON_CONTENT_TYPE = "application/json"

# Body fragment injected or removed depending on PROVIDER
PROVIDER_VARIABLE = "PROVIDER"
PROVIDER_TOKEN = "$PROVIDER"
PROVIDER_ORDER_SNIPPET = ', "provider": {"order": ["$PROVIDER"]}'

# jq post-processing
JQ_EXECUTABLE = "jq"
JQ_MAX_BUFFER = 50 * 1024 * 1024

# Debug output
DEBUG_BODY_PREVIEW = 200
