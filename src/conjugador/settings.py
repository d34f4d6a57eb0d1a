"""
Settings and configuration for Conjugador.

Every value can be overridden through the environment.
"""

import os

# Separator used when a cell with several accepted spellings is rendered as text.
# Affects API output only; composer literals keep "/" (table.LITERAL_SEPARATOR).
FORM_SEPARATOR = os.environ.get("CONJUGADOR_FORM_SEPARATOR", "/")

# Variant used by the HTTP service when a request does not name one
DEFAULT_VARIANT = os.environ.get("CONJUGADOR_DEFAULT_VARIANT", "bp_post_reform")

# Logging
LOG_LEVEL = os.environ.get("CONJUGADOR_LOG_LEVEL", "INFO").upper()

# Debug mode
DEBUG = os.environ.get("CONJUGADOR_DEBUG", "").lower() in ("1", "true", "yes")

# Development server bind
HOST = os.environ.get("CONJUGADOR_HOST", "0.0.0.0")
PORT = int(os.environ.get("CONJUGADOR_PORT", "8000"))
RELOAD = os.environ.get("CONJUGADOR_RELOAD", "").lower() in ("1", "true", "yes")

# Longest raw infinitive accepted by the HTTP service
MAX_INFINITIVE_LENGTH = 64
