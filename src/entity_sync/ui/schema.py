"""Pydantic models for synchronization input files."""

from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class SyncPayload(BaseModel):
    """JSON document holding the desired state, one record per transfer object."""

    model_config = ConfigDict(extra="ignore")

    records: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_file(cls, path: Path) -> SyncPayload:
        """Load a payload; a bare JSON list is read as the record list."""

        raw: object = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(raw, list):
            return cls.model_validate({"records": raw})
        return cls.model_validate(raw)

    def to_dtos[TDto](self, dto_type: type[TDto]) -> list[TDto]:
        """Validate every record into ``dto_type``."""

        adapter = TypeAdapter(list[dto_type])  # pyright: ignore[reportInvalidTypeForm]
        return adapter.validate_python(self.records)
