"""
FastAPI dependencies.

The store is created once by the application factory and kept on
`app.state`; handlers receive it through `Depends(get_store)`.
"""

from fastapi import Request

from shortlinks.services.link_store import ShortLinkStore


def get_store(request: Request) -> ShortLinkStore:
    """
    Dependency returning the application's short-link store.

    Usage in FastAPI:
        @router.get("/endpoint")
        async def endpoint(store: ShortLinkStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
