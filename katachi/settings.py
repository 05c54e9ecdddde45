"""
Settings and configuration for Katachi.

Every value can be overridden through the environment.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = Path(os.environ.get("KATACHI_DATA_DIR", PACKAGE_DIR / "data"))

# Bundled tables
IRREGULAR_CSV_PATH = Path(os.environ.get("KATACHI_IRREGULAR_CSV", DATA_DIR / "irregular_verbs.csv"))
TRANSLATIONS_CSV_PATH = Path(os.environ.get("KATACHI_TRANSLATIONS_CSV", DATA_DIR / "translations.csv"))

# Debug mode
DEBUG = os.environ.get("KATACHI_DEBUG", "").lower() in ("1", "true", "yes")

# Log level used by the CLI
LOG_LEVEL = os.environ.get("KATACHI_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()

# Gloss shown when a construction has no translation entry
FALLBACK_GLOSS = "I verb"

# Formality used when the caller does not pick one
DEFAULT_FORMALITY = os.environ.get("KATACHI_DEFAULT_FORMALITY", "casual").lower()
