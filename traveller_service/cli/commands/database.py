"""Database management commands.

Schema changes in deployed environments go through Alembic
(``alembic upgrade head``); ``create`` is for local and SQLite runs.

Example:bash
    traveller-service db check
    traveller-service db create
    traveller-service db seed --tenant default
"""

import click
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from traveller_service.cli.utils import coro, counts_table, fail, header, info, success
from traveller_service.core.settings import get_db_settings


@click.group(name="db")
def db() -> None:
    """Database management commands."""


@db.command()
@coro
async def check() -> None:
    """Test the database connection."""
    from traveller_service.infra.database import close_database, get_engine

    settings = get_db_settings()
    if not settings.is_configured:
        fail("Database is not configured (set DB_DATABASE_URL or DB_HOST/DB_NAME)")

    info("Connecting to database...")
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        fail(f"Database connection failed: {e}")
    finally:
        await close_database()
    success("Database connection OK")


@db.command()
@coro
async def create() -> None:
    """Create all tables from the models (no migrations)."""
    from traveller_service.core.models import Base
    from traveller_service.infra.database import close_database, get_engine

    info("Creating tables...")
    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        fail(f"Failed to create tables: {e}")
    finally:
        await close_database()
    success(f"Created {len(Base.metadata.tables)} tables")


@db.command()
@click.option("--tenant", "tenant_name", default="default", show_default=True, help="Tenant name to create")
@coro
async def seed(tenant_name: str) -> None:
    """Create a tenant and fill it with the demo catalogue."""
    from traveller_service.features.tenants.seed import seed_catalogue
    from traveller_service.infra.database import close_database, get_async_session

    header(f"Seeding tenant {tenant_name!r}")
    try:
        async with get_async_session() as session:
            summary = await seed_catalogue(session, tenant_name)
            await session.commit()
    except IntegrityError:
        fail(f"Tenant {tenant_name!r} already exists")
    except (SQLAlchemyError, OSError) as e:
        fail(f"Seeding failed: {e}")
    finally:
        await close_database()

    counts_table(summary.counts)
    success(f"Seeded tenant {tenant_name!r} (id={summary.tenant_id})")
