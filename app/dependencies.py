from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.db.session import get_db_session
from app.services.dictionary.source import FileWordSource
from app.services.xor.orchestrator import AttackOrchestrator


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Database session dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with get_db_session() as session:
        yield session

DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


# Read-only after construction, shared by all requests
_orchestrator = AttackOrchestrator()


def get_orchestrator() -> AttackOrchestrator:
    return _orchestrator

OrchestratorDep = Annotated[AttackOrchestrator, Depends(get_orchestrator)]


@lru_cache
def _file_word_source(path: str, encoding: str) -> FileWordSource:
    return FileWordSource(path, encoding)


# Dictionary file dependency, one source (and one read) per path and encoding
def get_word_source(settings: SettingsDep) -> FileWordSource:
    """Get the cached word source for the configured dictionary file."""
    return _file_word_source(settings.dictionary_path, settings.dictionary_encoding)

WordSourceDep = Annotated[FileWordSource, Depends(get_word_source)]
