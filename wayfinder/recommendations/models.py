from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BudgetTier(str, Enum):
    budget = "Budget"
    mid = "Mid"
    luxury = "Luxury"


class Interest(str, Enum):
    beach = "Beach"
    hiking = "Hiking"
    culture = "Culture"
    food = "Food"
    nightlife = "Nightlife"
    nature = "Nature"
    adventure = "Adventure"
    history = "History"
    relaxation = "Relaxation"
    shopping = "Shopping"


# Budget values that mean "no preference"
ANY_BUDGET = "Any"
_BUDGET_WILDCARDS = {"", ANY_BUDGET}


class Destination(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    country: str = ""
    budget: BudgetTier
    best_months: tuple[str, ...] = ()
    interests: tuple[Interest, ...] = ()
    image_url: str = ""
    description: str = ""


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    budget: BudgetTier | None = Field(
        default=None,
        description='Budget tier to match; "Any", "" or null for no preference',
    )
    month: str = Field(default="", description="Travel month, partial names allowed")
    interests: tuple[Interest, ...] = Field(default_factory=tuple)

    @field_validator("budget", mode="before")
    @classmethod
    def _wildcard_budget(cls, value):
        if value is None or (isinstance(value, str) and value.strip() in _BUDGET_WILDCARDS):
            return None
        return value

    @field_validator("interests", mode="after")
    @classmethod
    def _dedupe_interests(cls, value: tuple[Interest, ...]) -> tuple[Interest, ...]:
        return tuple(dict.fromkeys(value))


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    budget: float
    month: float
    interests: float


class ScoredResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: Destination
    score: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown | None = None


# ── HTTP payloads ────────────────────────────────────────────────────────


class ResultOut(BaseModel):
    destination: Destination
    score: int | None = None
    breakdown: ScoreBreakdown | None = None


class ViewResponse(BaseModel):
    mode: str
    headline: str
    total: int
    results: list[ResultOut]


class MetadataResponse(BaseModel):
    budgets: list[str]
    interests: list[str]
    months: list[str]
