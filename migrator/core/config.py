"""
Migrator configuration constants.

Constants are organized into:
- FIXED: Properties of the numbering plan, not deployment choices
- OPERATIONAL: Deployment-specific settings (env vars)
"""

import os

# =============================================================================
# FIXED CONSTANTS
# =============================================================================

# ITU-T E.164: at most 15 digits, excluding the '+'
MAX_E164_DIGITS: int = 15

# Characters stripped from raw numbers before digit validation
NUMBER_FORMATTING_CHARS: frozenset[str] = frozenset({" ", "-", ".", "(", ")", "\t"})

# =============================================================================
# OPERATIONAL SETTINGS (deployment-specific, via environment variables)
# =============================================================================

LOG_LEVEL: str = os.getenv("MIGRATOR_LOG_LEVEL", "INFO")

# Empty means console logging only
LOG_FILE: str = os.getenv("MIGRATOR_LOG_FILE", "")

# Recipes CSV field delimiter
CSV_DELIMITER: str = os.getenv("MIGRATOR_CSV_DELIMITER", ",")

# Region used by the CLI when --region is omitted; empty means required
DEFAULT_REGION: str = os.getenv("MIGRATOR_DEFAULT_REGION", "")
