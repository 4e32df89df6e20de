from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from uptime_dashboard.schemas.common import Identity

Record = Dict[str, Any]


class RecordStore(ABC):
    """
    Generic remote record store the gateway talks to.

    Tables are addressed by name and records are flat camelCase dicts.
    Implementations signal any failure by raising; the gateway decides what
    to do about it.
    """

    @abstractmethod
    async def list(
        self,
        table: str,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> List[Record]:
        ...

    @abstractmethod
    async def create(self, table: str, record: Mapping[str, Any]) -> Record:
        ...

    @abstractmethod
    async def update(
        self,
        table: str,
        id: str,
        record: Mapping[str, Any],
        *,
        where: Optional[Mapping[str, Any]] = None,
    ) -> Record:
        """Update one record; ``where`` narrows the match beyond its id."""
        ...

    @abstractmethod
    async def delete(
        self, table: str, id: str, *, where: Optional[Mapping[str, Any]] = None
    ) -> None:
        ...

    @abstractmethod
    async def current_user(self) -> Identity:
        ...
