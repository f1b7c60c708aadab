"""HTTP boundary for the shop API.

Routes build a HandlerRequest, run the matching entry of the wrapped
handler table, and translate the Outcome:

- Ok: JSON body (or the raw bytes of a StaticDocument)
- NotFound: 404
- Err: the reason is re-raised once into the registered error handlers
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from shop_api.api.dependencies import HandlersDep, StorageDep, lifespan
from shop_api.api.errors import register_error_handlers
from shop_api.config import settings
from shop_api.dto import HandlerRequest, HealthCheckResponse
from shop_api.entities import Err, NotFound, Outcome, StaticDocument
from shop_api.errors import MalformedBodyError
from shop_api.handlers.auto_catch import Handler


async def build_request(request: Request) -> HandlerRequest:
    """Build the handler's request descriptor from a Starlette request.

    Raises:
        MalformedBodyError: If a body is present but is not valid JSON
    """
    body = None
    if await request.body():
        try:
            body = await request.json()
        except ValueError as e:
            raise MalformedBodyError("Request body is not valid JSON") from e

    return HandlerRequest(
        params=dict(request.path_params),
        query=dict(request.query_params),
        body=body,
    )


def render(outcome: Outcome) -> Response:
    """Translate a handler outcome into a response."""
    if isinstance(outcome, Err):
        raise outcome.reason
    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    value = outcome.value
    if isinstance(value, StaticDocument):
        return Response(content=value.content, media_type=value.media_type)
    return JSONResponse(content=jsonable_encoder(value))


async def dispatch(handler: Handler, request: Request) -> Response:
    """Run one wrapped handler against a request."""
    outcome = await handler(await build_request(request))
    return render(outcome)


app = FastAPI(
    title="Shop API",
    description="Products and orders CRUD service",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/", include_in_schema=False)
async def root(request: Request, handlers: HandlersDep) -> Response:
    """Serve the static index page."""
    return await dispatch(handlers["handle_root"], request)


@app.get("/health", response_model=HealthCheckResponse)
async def health(storage: StorageDep) -> JSONResponse:
    """Health check endpoint; 503 when storage is unreachable."""
    is_healthy = await storage.health_check()
    body = HealthCheckResponse(
        status="healthy" if is_healthy else "unhealthy",
        storage_healthy=is_healthy,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


@app.get("/products")
async def list_products(request: Request, handlers: HandlersDep) -> Response:
    """List products. Query: offset, limit, tag."""
    return await dispatch(handlers["list_products"], request)


@app.get("/products/{id}")
async def get_product(request: Request, handlers: HandlersDep) -> Response:
    """Get a product by id."""
    return await dispatch(handlers["get_product"], request)


@app.post("/products")
async def create_product(request: Request, handlers: HandlersDep) -> Response:
    """Create a product from the JSON body."""
    return await dispatch(handlers["create_product"], request)


@app.put("/products/{id}")
async def edit_product(request: Request, handlers: HandlersDep) -> Response:
    """Apply the JSON body as a change to a product."""
    return await dispatch(handlers["edit_product"], request)


@app.delete("/products/{id}")
async def delete_product(request: Request, handlers: HandlersDep) -> Response:
    """Delete a product."""
    return await dispatch(handlers["delete_product"], request)


@app.get("/orders")
async def list_orders(request: Request, handlers: HandlersDep) -> Response:
    """List orders. Query: offset, limit, productId, status."""
    return await dispatch(handlers["list_orders"], request)


@app.get("/orders/{id}")
async def get_order(request: Request, handlers: HandlersDep) -> Response:
    """Get an order by id."""
    return await dispatch(handlers["get_order"], request)


@app.post("/orders")
async def create_order(request: Request, handlers: HandlersDep) -> Response:
    """Create an order from the JSON body."""
    return await dispatch(handlers["create_order"], request)


@app.put("/orders/{id}")
async def edit_order(request: Request, handlers: HandlersDep) -> Response:
    """Apply the JSON body as a change to an order."""
    return await dispatch(handlers["edit_order"], request)


@app.delete("/orders/{id}")
async def delete_order(request: Request, handlers: HandlersDep) -> Response:
    """Delete an order."""
    return await dispatch(handlers["delete_order"], request)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shop_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
