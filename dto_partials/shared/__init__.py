# 📄 File: dto_partials/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools
# that every part of the data layer can use.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, exceptions and logging.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All data layer modules

"""
Shared Kernel - Common Utilities

- Configuration management
- Exception hierarchy
- Logging utilities
"""

__all__ = []
