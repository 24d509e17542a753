"""Allow running as ``python -m console_log_check``."""

from console_log_check.cli import main

main()
