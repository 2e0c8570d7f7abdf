# 📄 File: dto_partials/modules/partials/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the partials module.
# 🧪 Purpose (Technical Summary):
# Presentation layer package for FastAPI integration.
# 🔗 Dependencies:
# dto_partials.modules.partials.presentation.api, dto_partials.modules.partials.presentation.dependencies
# 🔄 Connected Modules / Calls From:
# FastAPI applications

__all__ = []
