"""Tag label cache dependencies.

ONLY tag label cache dependencies - provides FastAPI dependency injection
of the shared tag label cache for catalog resources.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Annotated
from fastapi import Depends

from ..application.services.tag_label_cache import TagLabelCache, get_tag_label_cache


async def get_label_cache() -> TagLabelCache:
    """Get the shared tag label cache.

    The cache must have been created at application startup:

    ```python
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await get_tag_label_cache(repositories)
        yield
        await reset_tag_label_cache()

    @router.get("/tags/{fqn}/exclusive")
    async def exclusive(fqn: str, cache: LabelCacheDependency):
        return await cache.is_mutually_exclusive(TagLabel.classification(fqn))
    ```
    """
    return await get_tag_label_cache()


LabelCacheDependency = Annotated[TagLabelCache, Depends(get_label_cache)]
