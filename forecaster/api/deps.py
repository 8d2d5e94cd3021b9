"""FastAPI dependency injection."""

import secrets
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from forecaster.config import settings
from forecaster.data.scenario_store import ScenarioStore

basic_auth = HTTPBasic(auto_error=False)


@lru_cache
def get_engine() -> AsyncEngine:
    return create_async_engine(settings.database_url, echo=settings.debug)


@lru_cache
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), expire_on_commit=False)


async def get_db() -> AsyncSession:
    async with get_sessionmaker()() as session:
        yield session


def get_scenario_store(db: AsyncSession = Depends(get_db)) -> ScenarioStore:
    return ScenarioStore(db)


def require_auth(credentials: HTTPBasicCredentials | None = Depends(basic_auth)) -> str:
    """Check the shared scenario credentials; 401 with a Basic challenge otherwise."""
    valid = credentials is not None and (
        secrets.compare_digest(credentials.username.encode(), settings.scenario_username.encode())
        & secrets.compare_digest(credentials.password.encode(), settings.scenario_password.encode())
    )
    if not valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": f'Basic realm="{settings.auth_realm}"'},
        )
    return credentials.username
