# 📄 File: garden_tracker/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Small helpers used all over the app, mainly logging.
#
# 🧪 Purpose (Technical Summary):
# Structured logging utilities.
#
# 🔗 Dependencies:
# - python-json-logger
#
# 🔄 Connected Modules / Calls From:
# - All modules

from .logging import get_logger, log_context, setup_logging

__all__ = ["get_logger", "log_context", "setup_logging"]
