# 📄 File: dto_partials/modules/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the feature modules of the data layer.
#
# 🧪 Purpose (Technical Summary):
# Feature modules package following domain/application/presentation layering.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - dto_partials package initialization

__all__ = []
