# 📄 File: dto_partials/modules/partials/presentation/api/request_partials.py
# 🧭 Purpose (Layman Explanation):
# Reads the include/exclude/only/except options out of an incoming web request, whether the
# client wrote them as "include=a,b", "include[]=a&include[]=b" or "include[album]=title".
#
# 🧪 Purpose (Technical Summary):
# Request adapters implementing the partials request interface on top of Starlette requests
# and plain mappings, turning bracketed query keys into structured mappings.
#
# 🔗 Dependencies:
# - starlette Request / QueryParams (through FastAPI)
# - dto_partials.shared.config.settings (parameter names)
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.presentation.dependencies (FastAPI dependency)
# - dto_partials.modules.partials.presentation.api.responses

from typing import Any, Dict, List, Mapping, Optional

from starlette.datastructures import QueryParams
from starlette.requests import Request

from dto_partials.shared.config.settings import Settings, get_settings


class MappingRequestPartials:
    """Partials parameters read from a plain mapping such as parsed JSON or test input."""

    def __init__(self, params: Optional[Mapping[str, Any]] = None, settings: Optional[Settings] = None):
        self.params = dict(params or {})
        self.settings = settings or get_settings()

    def get_include_param(self) -> Any:
        return self.params.get(self.settings.INCLUDE_PARAM)

    def get_exclude_param(self) -> Any:
        return self.params.get(self.settings.EXCLUDE_PARAM)

    def get_only_param(self) -> Any:
        return self.params.get(self.settings.ONLY_PARAM)

    def get_except_param(self) -> Any:
        return self.params.get(self.settings.EXCEPT_PARAM)


class StarletteRequestPartials(MappingRequestPartials):
    """
    Partials parameters read from a Starlette/FastAPI request query string.

    Supported encodings for a parameter ``include``:

    - ``include=a,b.c``: comma separated string
    - ``include=a&include=b``: repeated key, read as a list
    - ``include[]=a&include[]=b``: array style, read as a list
    - ``include[b]=c,d``: keyed array style, read as ``{"b": "c,d"}``
    """

    def __init__(self, request: Request, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        params = {}
        for name in (settings.INCLUDE_PARAM, settings.EXCLUDE_PARAM, settings.ONLY_PARAM, settings.EXCEPT_PARAM):
            value = query_param(request.query_params, name)
            if value is not None:
                params[name] = value
        super().__init__(params, settings)
        self.request = request


def query_param(query_params: QueryParams, name: str) -> Any:
    """Collect one partials parameter from query params, None when absent."""
    values: List[str] = []
    keyed: Dict[str, List[str]] = {}
    found = False

    for key, value in query_params.multi_items():
        if key == name:
            values.append(value)
            found = True
            continue

        inner = _bracket_key(key, name)
        if inner is None:
            continue

        found = True
        if inner == "" or inner.isdigit():
            values.append(value)
        else:
            keyed.setdefault(inner, []).append(value)

    if not found:
        return None

    if keyed:
        structured: Dict[str, Any] = {str(index): value for index, value in enumerate(values)}
        structured.update({key: _single(items) for key, items in keyed.items()})
        return structured

    return _single(values)


def _bracket_key(key: str, name: str) -> Optional[str]:
    prefix = f"{name}["
    if not key.startswith(prefix) or not key.endswith("]"):
        return None
    # include[nested][deep] -> nested.deep
    return key[len(prefix):-1].replace("][", ".")


def _single(values: List[str]) -> Any:
    if len(values) == 1:
        return values[0]
    return values


def adapt_request(request: Any, settings: Optional[Settings] = None) -> Any:
    """Wrap a Starlette request or a mapping; other objects are used as they are."""
    if isinstance(request, Request):
        return StarletteRequestPartials(request, settings)
    if request is None or isinstance(request, Mapping):
        return MappingRequestPartials(request, settings)
    return request


__all__ = [
    "MappingRequestPartials",
    "StarletteRequestPartials",
    "query_param",
    "adapt_request",
]
