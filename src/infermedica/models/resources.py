"""Models for the medical knowledge base: conditions, symptoms, lab tests,
risk factors and API info.

Only the commonly used keys are declared; anything else the API sends is
kept as an extra field and survives ``to_dict()``.
"""

from __future__ import annotations

from typing import Any

from infermedica.models.base import FrozenApiModel


class Condition(FrozenApiModel):
    id: str
    name: str | None = None
    common_name: str | None = None
    sex_filter: str | None = None  # "both" | "male" | "female"
    categories: list[str] | None = None
    prevalence: str | None = None
    acuteness: str | None = None
    severity: str | None = None
    triage_level: str | None = None
    hint: str | None = None
    extras: dict[str, Any] | None = None


class Symptom(FrozenApiModel):
    id: str
    name: str | None = None
    common_name: str | None = None
    question: str | None = None
    sex_filter: str | None = None
    category: str | None = None
    seriousness: str | None = None
    children: list[dict[str, Any]] | None = None
    parent_id: str | None = None
    parent_relation: str | None = None
    image_url: str | None = None
    image_source: str | None = None
    extras: dict[str, Any] | None = None

    @property
    def child_ids(self) -> list[str]:
        return [c["id"] for c in self.children or [] if "id" in c]


class LabTestResult(FrozenApiModel):
    id: str
    type: str | None = None  # "very_low" | "low" | "normal" | "high" | ...


class LabTest(FrozenApiModel):
    id: str
    name: str | None = None
    common_name: str | None = None
    category: str | None = None
    results: list[LabTestResult] | None = None


class RiskFactor(FrozenApiModel):
    id: str
    name: str | None = None
    common_name: str | None = None
    question: str | None = None
    sex_filter: str | None = None
    category: str | None = None
    seriousness: str | None = None
    image_url: str | None = None
    image_source: str | None = None
    extras: dict[str, Any] | None = None


class Info(FrozenApiModel):
    """API build information and knowledge-base sizes."""

    api_version: str | None = None
    updated_at: str | None = None
    conditions_count: int | None = None
    symptoms_count: int | None = None
    risk_factors_count: int | None = None
    lab_tests_count: int | None = None
