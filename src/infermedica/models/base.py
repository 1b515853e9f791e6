"""Base class for all Infermedica payload models.

Every model keeps fields it does not declare (``extra="allow"``) so that a
payload fetched from the API can be sent back without losing data.
"""

from __future__ import annotations

import json
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """A JSON object for the API with typed accessors for known keys.

    Request bodies are built up by the caller, so unset optional fields
    (None) are left out of the payload.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> Self:
        return cls.model_validate(payload)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict including undeclared fields. None values are omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


class FrozenApiModel(ApiModel):
    """Read-only snapshot of a response payload.

    ``to_dict()`` emits exactly the keys the payload carried, explicit
    nulls included, and nothing filled in from defaults.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)
