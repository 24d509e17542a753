"""console-log-check: stop hook that nags about leftover console.log calls."""

import logging

__version__ = "1.0.0"

from console_log_check.config import HookConfig  # noqa: E402
from console_log_check.runner import HookResult, Outcome, run_hook  # noqa: E402

__all__ = ["HookConfig", "HookResult", "Outcome", "run_hook", "__version__"]

# stderr belongs to the hook's warnings; keep logging's last-resort handler off it
logging.getLogger(__name__).addHandler(logging.NullHandler())
