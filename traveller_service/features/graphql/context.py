"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and provides:
- Database session (for queries)
- Resolved tenant (None tenant id means single-tenant mode)
- GraphQL settings (page sizes, strict pagination)

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

from traveller_service.core.dependencies.tenant import TenantContext
from traveller_service.core.settings import get_graphql_settings

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from traveller_service.core.settings import GraphQLSettings


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Example usage in resolver:
        @strawberry.field
        async def node(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> Node | None:
            return await node_registry.node(id, info.context)
    """

    # Standard Strawberry/FastAPI context fields
    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    # Custom application fields
    session: AsyncSession = field(default=None)  # type: ignore[assignment]
    tenant: TenantContext = field(default_factory=TenantContext)
    settings: GraphQLSettings = field(default_factory=get_graphql_settings)

    @property
    def tenant_id(self) -> int | None:
        return self.tenant.tenant_id


__all__ = ["GraphQLContext"]
