# 📄 File: dto_partials/modules/partials/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The module that decides which optional fields end up in a response.
#
# 🧪 Purpose (Technical Summary):
# Partials module: tree model and resolution engine (domain), data objects and
# transformation (application), FastAPI integration (presentation).
#
# 🔗 Dependencies:
# - pydantic, FastAPI
#
# 🔄 Connected Modules / Calls From:
# - dto_partials package initialization

"""
Partials Module

Layers:
- domain: tree nodes, lazy values, schema descriptors, parser and resolvers
- application: Data/DataCollection base classes and the transformer
- presentation: request adapters, responses and FastAPI dependencies
"""

__all__ = []
