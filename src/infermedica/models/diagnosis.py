"""Request and response models for the interview endpoints.

A DiagnosisRequest is built by the caller and submitted to /diagnosis,
/triage (and their covid19 variants). ExplainRequest adds the target
condition required by /explain, SuggestRequest is the body for /suggest.
All three share PatientRequest.
"""

from __future__ import annotations

import enum
from typing import Any, Self

from pydantic import Field

from infermedica.models.base import ApiModel, FrozenApiModel


class Sex(enum.StrEnum):
    MALE = "male"
    FEMALE = "female"


class EvidenceChoice(enum.StrEnum):
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


class Evidence(ApiModel):
    """One observation: a symptom, risk factor or lab test id plus its state."""

    id: str
    choice_id: EvidenceChoice = EvidenceChoice.PRESENT
    source: str | None = None  # "initial" | "suggest" | "predefined" | "red_flags"
    initial: bool | None = None
    observed_at: str | None = None


class Age(ApiModel):
    value: int
    unit: str = "year"


class PatientRequest(ApiModel):
    """Demographics plus the evidence collected so far."""

    sex: Sex
    age: int | Age
    evidence: list[Evidence] = Field(default_factory=list)
    extras: dict[str, Any] | None = None

    def add_evidence(
        self,
        id: str,
        choice_id: EvidenceChoice | str = EvidenceChoice.PRESENT,
        **kwargs: Any,
    ) -> Evidence:
        item = Evidence(id=id, choice_id=choice_id, **kwargs)
        self.evidence.append(item)
        return item

    def add_symptom(
        self, id: str, choice_id: EvidenceChoice | str = EvidenceChoice.PRESENT, **kwargs: Any
    ) -> Evidence:
        return self.add_evidence(id, choice_id, **kwargs)

    def add_risk_factor(
        self, id: str, choice_id: EvidenceChoice | str = EvidenceChoice.PRESENT, **kwargs: Any
    ) -> Evidence:
        return self.add_evidence(id, choice_id, **kwargs)

    def age_value(self) -> int:
        return self.age.value if isinstance(self.age, Age) else self.age


class DiagnosisRequest(PatientRequest):
    evaluated_at: str | None = None

    def with_bare_age(self) -> Self:
        """Copy of this request with ``age`` reduced to its bare value.

        The covid19 endpoints reject the ``{"value": ..., "unit": ...}`` form.
        The original request is left untouched.
        """
        return self.model_copy(update={"age": self.age_value()}, deep=True)


class ExplainRequest(DiagnosisRequest):
    """Diagnosis request plus the condition id to be explained."""

    target: str | None = None


class SuggestRequest(PatientRequest):
    suggest_method: str | None = None  # "symptoms" | "risk_factors" | "red_flags"


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class QuestionItem(FrozenApiModel):
    id: str
    name: str | None = None
    choices: list[dict[str, Any]] | None = None


class Question(FrozenApiModel):
    type: str  # "single" | "group_single" | "group_multiple"
    text: str | None = None
    items: list[QuestionItem] = Field(default_factory=list)
    extras: dict[str, Any] | None = None


class ConditionProbability(FrozenApiModel):
    id: str
    name: str | None = None
    common_name: str | None = None
    probability: float | None = None


class DiagnosisResponse(FrozenApiModel):
    question: Question | None = None
    conditions: list[ConditionProbability] = Field(default_factory=list)
    extras: dict[str, Any] | None = None
    should_stop: bool | None = None
    has_emergency_evidence: bool | None = None

    def top_condition(self) -> ConditionProbability | None:
        if not self.conditions:
            return None
        return max(self.conditions, key=lambda c: c.probability or 0.0)


class TriageResponse(FrozenApiModel):
    triage_level: str | None = None
    serious: list[dict[str, Any]] | None = None
    root_cause: str | None = None
    teleconsultation_applicable: bool | None = None


class ExplainResponse(FrozenApiModel):
    supporting_evidence: list[dict[str, Any]] = Field(default_factory=list)
    conflicting_evidence: list[dict[str, Any]] = Field(default_factory=list)
    unconfirmed_evidence: list[dict[str, Any]] = Field(default_factory=list)


class SearchResult(FrozenApiModel):
    id: str
    label: str | None = None


class Suggestion(FrozenApiModel):
    id: str
    name: str | None = None
    common_name: str | None = None
