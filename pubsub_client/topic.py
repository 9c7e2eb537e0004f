"""Topic and Subscription records sent to the service on create calls."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Topic(BaseModel):
    """Named publish destination. `type` is passed through to the server uninterpreted."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class Subscription(BaseModel):
    """Named pull destination bound to a topic."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
