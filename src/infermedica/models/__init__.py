"""Domain models for Infermedica API payloads."""

from infermedica.models.base import ApiModel, FrozenApiModel
from infermedica.models.diagnosis import (
    Age,
    ConditionProbability,
    DiagnosisRequest,
    DiagnosisResponse,
    Evidence,
    EvidenceChoice,
    ExplainRequest,
    ExplainResponse,
    PatientRequest,
    Question,
    QuestionItem,
    SearchResult,
    Sex,
    Suggestion,
    SuggestRequest,
    TriageResponse,
)
from infermedica.models.resources import (
    Condition,
    Info,
    LabTest,
    LabTestResult,
    RiskFactor,
    Symptom,
)

__all__ = [
    "Age",
    "ApiModel",
    "Condition",
    "ConditionProbability",
    "DiagnosisRequest",
    "DiagnosisResponse",
    "Evidence",
    "EvidenceChoice",
    "ExplainRequest",
    "ExplainResponse",
    "FrozenApiModel",
    "Info",
    "LabTest",
    "LabTestResult",
    "PatientRequest",
    "Question",
    "QuestionItem",
    "RiskFactor",
    "SearchResult",
    "Sex",
    "Suggestion",
    "SuggestRequest",
    "Symptom",
    "TriageResponse",
]
