# 📄 File: dto_partials/modules/partials/application/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the application layer of the partials module as a Python package.
#
# 🧪 Purpose (Technical Summary):
# Partials module application layer package initialization.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials

__all__ = []
