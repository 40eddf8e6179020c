# Base model for in-memory records
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Current instant, timezone-aware."""
    return datetime.now(timezone.utc)


class RecordModel(BaseModel):
    """Common base for stored records.

    Records are frozen: the stores hand the same object to every reader, so
    a change is always a new copy saved under the same key.
    """

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        key = getattr(self, "id", None) or getattr(self, "token", None)
        return f"<{self.__class__.__name__}({key})>"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON."""
        return self.model_dump(mode="json")
