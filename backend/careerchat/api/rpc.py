"""
Remote procedure router.

Procedures are registered by name as either queries (HTTP GET, input JSON in
the ``input`` query parameter) or mutations (HTTP POST, input JSON in the
body). Several procedures can be called in one request with
``/api/rpc/<a>,<b>/?batch=1``; batched inputs are keyed by position
(``{"0": {...}, "1": {...}}``).

Success envelope: ``{"result": {"data": ...}}``
Error envelope:   ``{"error": {"code": ..., "message": ..., "httpStatus": ...}}``
"""
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from pydantic import BaseModel, ValidationError
from careerchat.core.dependencies import RequestContext, get_request_context, require_auth
from careerchat.core.errors import (
    APIError,
    InvalidInputError,
    MethodNotSupportedError,
    NotFoundError,
)
from careerchat.core.logging import get_logger

logger = get_logger(__name__)

QUERY = "query"
MUTATION = "mutation"
_HTTP_METHOD = {QUERY: "GET", MUTATION: "POST"}


@dataclass(frozen=True)
class Procedure:
    """A named, remotely callable operation."""
    name: str
    kind: str
    handler: Callable[[str, Optional[BaseModel]], Any]
    input_model: Optional[Type[BaseModel]] = None

    @property
    def http_method(self) -> str:
        return _HTTP_METHOD[self.kind]


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item.get("loc", ())) or "input"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


class Router:
    """Registry of procedures. Every procedure requires an authenticated caller."""

    def __init__(self):
        self._procedures: Dict[str, Procedure] = {}

    def _register(self, kind: str, name: str, input_model: Optional[Type[BaseModel]]):
        def decorator(handler):
            if name in self._procedures:
                raise ValueError(f"Procedure '{name}' is already registered")
            self._procedures[name] = Procedure(name, kind, handler, input_model)
            return handler
        return decorator

    def query(self, name: str, input_model: Optional[Type[BaseModel]] = None):
        return self._register(QUERY, name, input_model)

    def mutation(self, name: str, input_model: Optional[Type[BaseModel]] = None):
        return self._register(MUTATION, name, input_model)

    @property
    def procedure_names(self) -> List[str]:
        return sorted(self._procedures)

    def get(self, name: str) -> Procedure:
        try:
            return self._procedures[name]
        except KeyError:
            raise NotFoundError(f"No procedure found on path '{name}'")

    def call(self, ctx: RequestContext, name: str, raw_input: Any, method: str) -> Any:
        """
        Validate input and run one procedure for the given caller.

        Raises:
            APIError subclasses for unknown procedures, wrong methods,
            missing identity, invalid input, or service failures.
        """
        procedure = self.get(name)
        if method != procedure.http_method:
            raise MethodNotSupportedError(
                f"Procedure '{name}' is a {procedure.kind} and must be called with {procedure.http_method}"
            )

        user_id = require_auth(ctx)

        parsed = None
        if procedure.input_model is not None:
            try:
                parsed = procedure.input_model.model_validate(
                    raw_input if raw_input is not None else {}
                )
            except ValidationError as e:
                raise InvalidInputError(_format_validation_error(e))

        return procedure.handler(user_id, parsed)


def _load_json(value: Optional[str]) -> Any:
    if value in (None, ""):
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        raise InvalidInputError("Invalid JSON format")


def _read_input(request) -> Any:
    if request.method == "GET":
        return _load_json(request.GET.get("input"))
    if not request.body:
        return None
    try:
        body = request.body.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInputError("Invalid JSON format")
    return _load_json(body)


def _error_payload(error: APIError) -> Dict[str, Any]:
    return {"error": error.to_dict()}


def _run(router: Router, ctx: RequestContext, name: str, raw_input: Any, method: str):
    """Run a procedure and return (payload, status)."""
    try:
        data = router.call(ctx, name, raw_input, method)
        return {"result": {"data": data}}, 200
    except APIError as e:
        if e.status_code >= 500:
            logger.error(f"Procedure '{name}' failed: {e.message}")
        return _error_payload(e), e.status_code
    except Exception as e:
        logger.error(f"Unhandled error in procedure '{name}': {e}", exc_info=True)
        error = APIError("Internal server error")
        return _error_payload(error), error.status_code


def make_rpc_view(router: Router):
    """Build the Django view dispatching requests to ``router``."""

    @csrf_exempt
    def rpc_endpoint(request, path: str):
        if request.method not in ("GET", "POST"):
            error = MethodNotSupportedError()
            return JsonResponse(_error_payload(error), status=error.status_code)

        ctx = get_request_context(request)
        is_batch = request.GET.get("batch") in ("1", "true")
        names = [name for name in path.split(",") if name] if is_batch else [path]

        try:
            raw_input = _read_input(request)
        except InvalidInputError as e:
            return JsonResponse(_error_payload(e), status=e.status_code)

        if not is_batch:
            payload, status = _run(router, ctx, path, raw_input, request.method)
            return JsonResponse(payload, status=status)

        if not names:
            error = InvalidInputError("Batch call names no procedures")
            return JsonResponse(_error_payload(error), status=error.status_code)
        if raw_input is not None and not isinstance(raw_input, dict):
            error = InvalidInputError("Batch input must be an object keyed by index")
            return JsonResponse(_error_payload(error), status=error.status_code)

        batch_input = raw_input or {}
        results = []
        statuses = set()
        for index, name in enumerate(names):
            payload, status = _run(
                router, ctx, name, batch_input.get(str(index)), request.method
            )
            results.append(payload)
            statuses.add(status)

        status = statuses.pop() if len(statuses) == 1 else 207
        return JsonResponse(results, status=status, safe=False)

    return rpc_endpoint
