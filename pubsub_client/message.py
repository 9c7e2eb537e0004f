"""Message record exchanged with the pub-sub service."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """Opaque payload published to a topic or pulled from a subscription."""

    model_config = ConfigDict(frozen=True)

    data: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize message for logging or transport."""
        return self.model_dump()
