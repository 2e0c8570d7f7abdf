# 📄 File: dto_partials/modules/partials/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the web-facing helpers: reading request options and building responses.
#
# 🧪 Purpose (Technical Summary):
# API helper exports for request adapters and response builders.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.presentation.api.*
#
# 🔄 Connected Modules / Calls From:
# - FastAPI endpoints, data objects

from dto_partials.modules.partials.presentation.api.request_partials import (
    MappingRequestPartials,
    StarletteRequestPartials,
    adapt_request,
    query_param,
)
from dto_partials.modules.partials.presentation.api.responses import data_response, resolve_payload

__all__ = [
    "MappingRequestPartials",
    "StarletteRequestPartials",
    "adapt_request",
    "query_param",
    "data_response",
    "resolve_payload",
]
