# 📄 File: dto_partials/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Sets up the helper tools other parts of the data layer use, mainly logging.

# 🧪 Purpose (Technical Summary):
# Utilities package exports for structured logging.

# 🔗 Dependencies:
# - dto_partials.shared.utils.logging

# 🔄 Connected Modules / Calls From:
# Used by: all data layer modules for logging

from dto_partials.shared.utils.logging import get_logger, log_context, setup_logging

__all__ = ["get_logger", "log_context", "setup_logging"]
