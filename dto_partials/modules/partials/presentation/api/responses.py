# 📄 File: dto_partials/modules/partials/presentation/api/responses.py
# 🧭 Purpose (Layman Explanation):
# Builds the final JSON answer for a web request from a data object, taking the client's
# include/exclude wishes into account.
#
# 🧪 Purpose (Technical Summary):
# Response helpers resolving request partials, transforming data objects and wrapping the
# payload into a FastAPI JSONResponse.
#
# 🔗 Dependencies:
# - FastAPI JSONResponse
# - dto_partials.modules.partials.domain.services.partials_tree_resolver
# - dto_partials.modules.partials.application.transformers.data_transformer
# - dto_partials.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# - Data.to_response(), DataCollection.to_response()
# - FastAPI endpoints returning data objects

from typing import Any, Optional

from fastapi.responses import JSONResponse

from dto_partials.modules.partials.application.transformers.data_transformer import DataTransformer
from dto_partials.modules.partials.domain.services.partials_tree_resolver import PartialsTreeFromRequestResolver
from dto_partials.modules.partials.presentation.api.request_partials import adapt_request
from dto_partials.shared.config.settings import Settings
from dto_partials.shared.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_payload(
    data: Any,
    request: Any,
    resolver: Optional[PartialsTreeFromRequestResolver] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """
    Resolve partial trees for a request and transform the data.

    Args:
        data: Data object or collection
        request: Starlette request, mapping of parameters, or partials request
        resolver: Resolver to use, a default one is created when omitted
        settings: Settings for parameter names and limits

    Returns:
        JSON-ready payload
    """
    resolver = resolver or PartialsTreeFromRequestResolver(settings=settings)
    trees = resolver.execute(data, adapt_request(request, settings))
    return DataTransformer().transform(data, trees)


def data_response(
    data: Any,
    request: Any,
    status_code: int = 200,
    resolver: Optional[PartialsTreeFromRequestResolver] = None,
    settings: Optional[Settings] = None,
) -> JSONResponse:
    """Build a JSONResponse for a data object honouring request partials."""
    payload = resolve_payload(data, request, resolver, settings)
    logger.debug(
        "Built data response",
        extra={"data_class": type(data).__name__, "status_code": status_code}
    )
    return JSONResponse(content=payload, status_code=status_code)
