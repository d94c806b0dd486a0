"""Persistence gateway over the local relational store"""
import logging
from typing import Any, Mapping, Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from mindful_campus.db.models import Base
from mindful_campus.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """
    Executes statements against the store and owns schema creation.
    
    Every call runs in its own session and commits before returning.
    Statements are SQLAlchemy constructs with bound parameters.
    """
    
    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=NullPool,
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
    
    async def create_schema(self) -> None:
        """Create missing tables; safe to run on every start"""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Schema creation failed: {e}")
            raise PersistenceError("Could not initialise storage") from e
        logger.info(f"Schema ready: {', '.join(Base.metadata.tables)}")
    
    async def execute(self, statement, params: Optional[Mapping[str, Any]] = None) -> list[dict]:
        """
        Run one statement and return its rows as dicts.
        
        Raises:
            PersistenceError: The store rejected the statement or could not be reached
        """
        async with self.session_factory() as session:
            try:
                result = await session.execute(statement, params)
                rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
                await session.commit()
            except (SQLAlchemyError, OSError) as e:
                await session.rollback()
                logger.error(f"Statement failed: {e}")
                raise PersistenceError() from e
        return rows
    
    async def insert_returning_id(self, statement, params: Optional[Mapping[str, Any]] = None) -> int:
        """
        Run an INSERT ... RETURNING id and return the identity of the new row.
        
        The identity comes from the insert itself, so concurrent writers never
        see each other's rows.
        """
        async with self.session_factory() as session:
            try:
                result = await session.execute(statement, params)
                new_id = result.scalar_one()
                await session.commit()
            except (SQLAlchemyError, OSError) as e:
                await session.rollback()
                logger.error(f"Insert failed: {e}")
                raise PersistenceError() from e
        return int(new_id)
    
    async def dispose(self) -> None:
        await self.engine.dispose()


def get_gateway(request: Request) -> PersistenceGateway:
    """Dependency returning the gateway attached to the running app"""
    return request.app.state.gateway
