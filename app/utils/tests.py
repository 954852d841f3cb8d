from typing import Optional

import httpx
from fastapi import FastAPI


def create_test_app(routers, middlewares=None, prefix: str = "") -> FastAPI:
    """
    Create a FastAPI test application with the given routers and middlewares.

    The app carries the same rate limiter and exception handlers as the
    server, so routes answer with the standard response shapes.

    Args:
        routers: The router, or list of routers, to include in the app.
        middlewares: Optional list of (middleware_class, config_dict) tuples.
        prefix: Optional path prefix for the included routers.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app([router1, router2], prefix="/api/v1")
    """
    # Create a fresh app
    app = FastAPI()

    # Setup rate limiting and exception handling
    from api.dependencies.rate_limits import setup_rate_limiter
    from infrastructure.http import register_exception_handlers

    setup_rate_limiter(app)
    register_exception_handlers(app)

    # Add any additional middlewares
    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    # Include the routers
    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router, prefix=prefix)

    return app


async def rate_limiting_helper(
    app,
    endpoint: str,
    request_limit: int,
    method: str = "get",
    expected_status: int = 200,
    headers: Optional[dict] = None,
) -> httpx.Response:
    """
    Helper function to test rate limiting for an endpoint.

    Args:
        app: The FastAPI app instance.
        endpoint: The endpoint to test.
        request_limit: Number of requests allowed before rate limiting.
        method: HTTP method to use (e.g., "get", "post").
        expected_status: Expected status code for successful requests.
        headers: Optional headers to include in the requests.

    Returns:
        httpx.Response: The rate-limited response.
    """
    transport = httpx.ASGITransport(app=app)
    headers = headers or {}

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        http_method = getattr(client, method.lower())

        # Make requests up to the limit
        for i in range(request_limit):
            response = await http_method(endpoint, headers=headers)
            assert (
                response.status_code == expected_status
            ), f"Request {i+1} failed with status {response.status_code}"

        # The next request should be rate limited
        response = await http_method(endpoint, headers=headers)
        assert response.status_code == 429, "Expected rate limiting to trigger"
        return response
