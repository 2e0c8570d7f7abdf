# 📄 File: dto_partials/modules/partials/domain/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the domain layer of the partials module as a Python package.
#
# 🧪 Purpose (Technical Summary):
# Partials module domain layer package initialization.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials

__all__ = []
