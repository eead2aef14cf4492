"""Compliance alert constants.

Single source of truth for the warning threshold. The runtime value comes from
``Settings.alert_warning_threshold_days``; this is its default.
"""

from typing import Final

# Days before an expiration date at which a warning is raised (inclusive)
DEFAULT_WARNING_THRESHOLD_DAYS: Final[int] = 30

# Prefix for rendered alert lines in the notification panel
ALERT_BULLET: Final[str] = "• "
