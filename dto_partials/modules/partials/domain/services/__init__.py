# 📄 File: dto_partials/modules/partials/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the services that read client requests and decide what goes into a response.
#
# 🧪 Purpose (Technical Summary):
# Domain service exports: partials parser, allowed partials parser and tree resolver.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.domain.services.*
#
# 🔄 Connected Modules / Calls From:
# - Application and presentation layers

from dto_partials.modules.partials.domain.services.allowed_partials_parser import AllowedPartialsParser
from dto_partials.modules.partials.domain.services.partials_parser import (
    PartialsParser,
    normalize_partials,
    split_directives,
)
from dto_partials.modules.partials.domain.services.partials_tree_resolver import (
    PartialsRequest,
    PartialsTreeFromRequestResolver,
    request_param,
)

__all__ = [
    "PartialsParser",
    "normalize_partials",
    "split_directives",
    "AllowedPartialsParser",
    "PartialsRequest",
    "PartialsTreeFromRequestResolver",
    "request_param",
]
