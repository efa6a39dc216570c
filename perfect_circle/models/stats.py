"""Cumulative player statistics record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Stats(BaseModel):
    """Serialised with the camelCase keys of the browser's saved record."""

    model_config = ConfigDict(populate_by_name=True)

    best_score: int = Field(0, alias="bestScore", ge=0, le=100)
    total_attempts: int = Field(0, alias="totalAttempts", ge=0)
    total_score: int = Field(0, alias="totalScore", ge=0)
    average_score: int = Field(0, alias="averageScore", ge=0, le=100)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> Stats:
        return cls.model_validate_json(raw)
