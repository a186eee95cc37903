import json
from typing import Any, Dict, List, Mapping, Optional

from fastapi import APIRouter, Request, Response
from starlette.status import HTTP_204_NO_CONTENT

from ..core import Mediator, NameWithArgs, coerce_definition
from ..logging_config import logger


async def serialize_request(request: Request) -> Dict[str, Any]:
    """Create a structured data dictionary used as the event of a routed signal.

    The dictionary is suitable for JMESPath extraction (see ``args_from``),
    e.g. ``path_params.adapter_id`` or ``body.name``.

    :param Request request: The raw FastAPI request object
    :return Dict[str, Any]: Structured data with body, headers, query_params, and path_params
    """
    raw_body = await request.body()
    body: Any = None
    if raw_body:
        try:
            body = json.loads(raw_body)
        except json.JSONDecodeError:
            # Non-JSON bodies are kept as text
            body = raw_body.decode("utf-8", errors="replace")

    return {
        "body": body,
        "headers": dict(request.headers),
        "query_params": dict(request.query_params),
        "path_params": dict(request.path_params),
    }


class MediatedRouter:
    """FastAPI router whose routes emit signals instead of calling handlers.

    Route matching and path parameter extraction are left to FastAPI. A
    string definition signals that handler name with the path parameters as
    arguments, in the order they appear in the path; any other handler
    definition is signalled with the serialized request as event. The
    MediatedRouter is the signal context in both cases.

    Example:
        router = MediatedRouter(mediator, {
            "/adapters/{adapter_id}": "show_adapter",
            "/adapters": ("create_adapter", args_from("body.name")),
        })
        app.include_router(router.router)
    """

    def __init__(
        self,
        mediator: Mediator,
        routes: Optional[Mapping[str, Any]] = None,
        prefix: str = "",
        methods: Optional[List[str]] = None,
        **router_kwargs: Any,
    ) -> None:
        self.mediator = mediator
        self.methods = methods or ["GET"]
        self.router = APIRouter(prefix=prefix, **router_kwargs)
        for path, definition in (routes or {}).items():
            self.add_route(path, definition)

    def add_route(
        self, path: str, definition: Any, methods: Optional[List[str]] = None
    ) -> None:
        """Mount a route that signals a handler definition when matched.

        Raises:
            InvalidDefinitionError: If the definition matches no known shape
        """
        methods = methods or self.methods

        if isinstance(definition, str):
            name = definition

            async def endpoint(request: Request) -> Response:
                args = list(request.path_params.values())
                self.mediator.signal(NameWithArgs(name, args), self, request)
                return Response(status_code=HTTP_204_NO_CONTENT)

        else:
            resolved = coerce_definition(definition)

            async def endpoint(request: Request) -> Response:
                event = await serialize_request(request)
                self.mediator.signal(resolved, self, event)
                return Response(status_code=HTTP_204_NO_CONTENT)

        self.router.add_api_route(
            path,
            endpoint,
            methods=methods,
            status_code=HTTP_204_NO_CONTENT,
            response_class=Response,
        )
        logger.info(f"Mounted mediated route: {methods} {path} -> {definition!r}")
