from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Annotated, Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin

from pydantic.fields import FieldInfo

JsonSchema = Dict[str, Any]

_JSON_TYPES = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    dict: "object",
    list: "array",
}


def _json_type(annotation: Any) -> Union[str, List[str]]:
    origin = get_origin(annotation)
    if origin is None:
        return _JSON_TYPES.get(annotation, "string")
    if origin is Annotated:
        return _json_type(get_args(annotation)[0])
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if not args:
            return "string"
        kinds = []
        for arg in args:
            kind = _json_type(arg)
            if kind not in kinds:
                kinds.append(kind)
        return kinds[0] if len(kinds) == 1 else kinds
    return "string"


def _description(annotation: Any) -> Optional[str]:
    if get_origin(annotation) is not Annotated:
        return None
    for extra in get_args(annotation)[1:]:
        if isinstance(extra, FieldInfo) and extra.description:
            return extra.description
        if isinstance(extra, str):
            return extra
    return None


def _parameter_schema(param: inspect.Parameter) -> JsonSchema:
    schema: JsonSchema = {"type": _json_type(param.annotation)}
    description = _description(param.annotation)
    if description:
        schema["description"] = description
    default = param.default
    if default is not inspect.Parameter.empty and default is not None:
        if isinstance(default, (str, int, float, bool)):
            schema["default"] = default
    return schema


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature
    required: tuple[str, ...] = ()

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": []}
        for param in self.signature.parameters.values():
            schema["properties"][param.name] = _parameter_schema(param)
            if param.default is inspect.Parameter.empty or param.name in self.required:
                schema["required"].append(param.name)
        if not schema["required"]:
            schema.pop("required")
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "inputSchema": self.parameter_schema,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
    required: Iterable[str] = (),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Register ``func`` as a tool.

    ``required`` lists parameters that callers must supply even though the
    function accepts ``None`` for them, so that a missing value can be
    reported as a readable error instead of a schema violation.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=inspect.signature(func, eval_str=True),
            required=tuple(required),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def get_api_function(name: str) -> ApiFunction:
    if name not in REGISTRY:
        raise KeyError(f"API function '{name}' is not registered.")
    return REGISTRY[name]


def call_api(name: str, **kwargs: Any) -> Any:
    return get_api_function(name).func(**kwargs)
