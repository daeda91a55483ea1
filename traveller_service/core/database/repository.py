"""Minimal generic repositories for SQLAlchemy models.

Session is always passed explicitly. For queries not covered here, use the
session directly: this is a convenience layer, not a cage.

Example:
    class WorldRepository(TenantAwareRepository[World]):
        async def find_by_uwp(self, session: AsyncSession, uwp: str) -> World | None:
            return await self.get_by(session, World.uwp, uwp)

    world_repo = WorldRepository(World)
    world = await world_repo.get_for_tenant(session, 42, tenant_id=1)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, func, select

from traveller_service.core.database.exceptions import NotFoundError
from traveller_service.core.database.tenancy import apply_tenant_filter
from traveller_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy import ColumnElement
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute


@dataclass(slots=True, frozen=True)
class SearchResult[T]:
    """Paginated search result container.

    Attributes:
        items: Items for the current page
        total: Total count across all pages
        limit: Page size
        offset: Current offset

    Example:
        result = await repo.search(session, stmt, limit=20, offset=0)
        print(f"Showing {len(result.items)} of {result.total}")
    """

    items: Sequence[T]
    total: int
    limit: int
    offset: int

    @property
    def page(self) -> int:
        """Current page number (1-indexed)."""
        return (self.offset // self.limit) + 1 if self.limit else 1

    @property
    def pages(self) -> int:
        """Total number of pages."""
        if self.limit == 0:
            return 1
        return (self.total + self.limit - 1) // self.limit

    @property
    def has_next(self) -> bool:
        """Whether there are more items after this page."""
        return self.offset + len(self.items) < self.total

    @property
    def has_prev(self) -> bool:
        """Whether there are items before this page."""
        return self.offset > 0


class BaseRepository[T]:
    """Minimal generic repository.

    Provides:
        - get(session, id) -> T | None
        - get_or_raise(session, id) -> T (raises NotFoundError)
        - get_by(session, attr, value) -> T | None
        - list(session, limit, offset) -> Sequence[T]
        - count(session, statement) -> int
        - search(session, statement, limit, offset) -> SearchResult[T]
        - create(session, instance) -> T
        - create_many(session, instances) -> Sequence[T]
    """

    __slots__ = ("model", "_logger", "_lazy")

    def __init__(self, model: type[T]) -> None:
        self.model = model
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        options: Iterable[Any] | None = None,
    ) -> T | None:
        """Get entity by primary key.

        Args:
            session: Database session
            id: Primary key value
            options: SQLAlchemy loader options (e.g., selectinload)

        Returns:
            Entity if found, None otherwise
        """
        if options:
            stmt = select(self.model).where(self._pk_attr() == id).options(*options)
            result = await session.execute(stmt)
            instance = result.scalar_one_or_none()
        else:
            instance = await session.get(self.model, id)

        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def get_or_raise(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        options: Iterable[Any] | None = None,
    ) -> T:
        """Get entity by primary key or raise NotFoundError."""
        instance = await self.get(session, id, options=options)
        if instance is None:
            self._logger.info(
                "Entity not found",
                extra={
                    "entity": self.model.__name__,
                    "id": str(id),
                    "operation": "db.get_or_raise",
                },
            )
            raise NotFoundError(self.model.__name__, {"id": id})
        return instance

    async def get_by(
        self,
        session: AsyncSession,
        attr: InstrumentedAttribute[Any],
        value: Any,
    ) -> T | None:
        """Get the first entity whose attribute equals value.

        Example:
            tenant = await repo.get_by(session, Tenant.name, "default")
        """
        stmt = select(self.model).where(attr == value).limit(1)
        result = await session.execute(stmt)
        instance = result.scalars().first()

        self._lazy.debug(
            lambda: f"db.get_by: {self.model.__name__}.{attr.key}={value!r} -> {'found' if instance else 'not found'}"
        )
        return instance

    async def list(
        self,
        session: AsyncSession,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> Sequence[T]:
        """List entities ordered by primary key."""
        stmt = select(self.model).order_by(self._pk_attr()).limit(limit).offset(offset)
        result = await session.execute(stmt)
        items = result.scalars().all()

        self._lazy.debug(
            lambda: f"db.list: {self.model.__name__}(limit={limit}, offset={offset}) -> {len(items)} items"
        )
        return items

    async def count(self, session: AsyncSession, statement: Select[Any] | None = None) -> int:
        """Count rows matched by a statement (all rows when omitted)."""
        if statement is None:
            statement = select(self.model)
        count_stmt = select(func.count()).select_from(statement.order_by(None).subquery())
        return (await session.execute(count_stmt)).scalar_one()

    async def search(
        self,
        session: AsyncSession,
        statement: Select[tuple[T]],
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> SearchResult[T]:
        """Execute a paginated search with total count.

        Takes a pre-built statement (filters and ordering applied) and adds
        limit/offset. A limit of 0 only counts.

        Example:
            stmt = select(World).where(World.name.ilike("%regina%")).order_by(World.id)
            result = await repo.search(session, stmt, limit=20, offset=0)
            print(f"Found {result.total} worlds, showing page {result.page}")
        """
        total = await self.count(session, statement)

        if limit > 0:
            result = await session.execute(statement.limit(limit).offset(offset))
            items = result.scalars().all()
        else:
            items = []

        search_result = SearchResult(items=items, total=total, limit=limit, offset=offset)
        self._lazy.debug(
            lambda: f"db.search: {self.model.__name__}(limit={limit}, offset={offset}) -> {len(items)}/{total} items, page {search_result.page}/{search_result.pages}"
        )
        return search_result

    async def create(self, session: AsyncSession, instance: T) -> T:
        """Persist a new entity, flushing to populate generated fields."""
        session.add(instance)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.create: {self.model.__name__}(id={entity_id})")
        return instance

    async def create_many(self, session: AsyncSession, instances: Iterable[T]) -> Sequence[T]:
        """Persist multiple entities."""
        instances_list = list(instances)
        session.add_all(instances_list)
        await session.flush()
        for instance in instances_list:
            await session.refresh(instance)

        self._lazy.debug(
            lambda: f"db.create_many: {self.model.__name__} -> {len(instances_list)} created"
        )
        return instances_list

    def _pk_attr(self) -> InstrumentedAttribute[Any]:
        return self.model.id  # type: ignore[attr-defined]


class TenantAwareRepository[T](BaseRepository[T]):
    """Repository for models using TenantMixin.

    Every method takes ``tenant_id``; None disables tenant filtering.
    Listing is always ordered by primary key, which is the ordering that
    connection cursors are minted against.
    """

    __slots__ = ()

    def tenant_statement(self, tenant_id: int | None) -> Select[tuple[T]]:
        """Select all rows visible to the tenant, ordered by id."""
        stmt = select(self.model).order_by(self._pk_attr())
        return apply_tenant_filter(stmt, self.model, tenant_id)

    async def get_for_tenant(
        self,
        session: AsyncSession,
        id: int,  # noqa: A002
        *,
        tenant_id: int | None,
    ) -> T | None:
        """Get entity by primary key if it belongs to the tenant."""
        instance = await self.get(session, id)
        if instance is None:
            return None
        if tenant_id is not None and getattr(instance, "tenant_id", None) != tenant_id:
            self._lazy.debug(
                lambda: f"db.get_for_tenant: {self.model.__name__}({id}) hidden from tenant {tenant_id}"
            )
            return None
        return instance

    async def list_for_tenant(self, session: AsyncSession, *, tenant_id: int | None) -> Sequence[T]:
        """All rows visible to the tenant, ordered by id."""
        result = await session.execute(self.tenant_statement(tenant_id))
        items = result.scalars().all()

        self._lazy.debug(
            lambda: f"db.list_for_tenant: {self.model.__name__}(tenant={tenant_id}) -> {len(items)} items"
        )
        return items

    async def filter_for_tenant(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        tenant_id: int | None,
    ) -> Sequence[T]:
        """Rows visible to the tenant that match every criterion, ordered by id.

        Example:
            await repo.filter_for_tenant(session, World.travel_zone == TravelZone.RED, tenant_id=1)
        """
        result = await session.execute(self.tenant_statement(tenant_id).where(*criteria))
        items = result.scalars().all()

        self._lazy.debug(
            lambda: f"db.filter_for_tenant: {self.model.__name__}(tenant={tenant_id}) -> {len(items)} items"
        )
        return items

    async def count_for_tenant(self, session: AsyncSession, *, tenant_id: int | None) -> int:
        return await self.count(session, self.tenant_statement(tenant_id))

    async def search_for_tenant(
        self,
        session: AsyncSession,
        term: str | None,
        *,
        tenant_id: int | None,
        limit: int,
        offset: int,
    ) -> SearchResult[T]:
        """Case-insensitive name search within the tenant, ordered by id."""
        stmt = self.tenant_statement(tenant_id)
        if term:
            stmt = stmt.where(self.model.name.ilike(f"%{term}%"))  # type: ignore[attr-defined]
        return await self.search(session, stmt, limit=limit, offset=offset)
