# 📄 File: dto_partials/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the core building blocks shared by the whole data layer.
# 🧪 Purpose (Technical Summary):
# Core package exports for the exception hierarchy.
# 🔗 Dependencies:
# dto_partials.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Domain, application and presentation layers

from dto_partials.shared.core.exceptions import (
    CannotCreateDataError,
    DataConfigurationError,
    DataLayerException,
)

__all__ = [
    "DataLayerException",
    "DataConfigurationError",
    "CannotCreateDataError",
]
