# 📄 File: dto_partials/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Makes the configuration tools easy to import from one place.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exports for the settings model and its cached factory.
#
# 🔗 Dependencies:
# - dto_partials.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - All modules requiring configuration

from dto_partials.shared.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
