"""infermedica: a Python interface to the Infermedica REST API.

You need a valid api_id and api_key (https://developer.infermedica.com).

    from infermedica import Api
    api = Api(api_id="xxxxx", api_key="xxxxxxxxxxx")

or configure the package defaults once and use the helper:

    import infermedica

    def setup(config):
        config.api_id = "xxxxx"
        config.api_key = "xxxxxxxxxxx"

    infermedica.configure(setup)
    client = infermedica.api(model="infermedica-en")
    client.get_conditions()
"""

from __future__ import annotations

from typing import Any

from infermedica.client import Api
from infermedica.config import Configuration, configuration, configure, reset_configuration
from infermedica.connection import DEFAULT_ENDPOINT, Connection
from infermedica.errors import (
    HttpError,
    InfermedicaError,
    MalformedResponse,
    MissingField,
    TransportFailure,
)
from infermedica.models import (
    Age,
    Condition,
    DiagnosisRequest,
    DiagnosisResponse,
    Evidence,
    EvidenceChoice,
    ExplainRequest,
    ExplainResponse,
    Info,
    LabTest,
    RiskFactor,
    SearchResult,
    Sex,
    Suggestion,
    SuggestRequest,
    Symptom,
    TriageResponse,
)


def api(config: Configuration | None = None, **overrides: Any) -> Api:
    """Build an Api from the default configuration; explicit overrides win."""
    base = config if config is not None else configuration()
    return Api(**{**base.as_kwargs(), **overrides})


__all__ = [
    "DEFAULT_ENDPOINT",
    "Age",
    "Api",
    "Condition",
    "Configuration",
    "Connection",
    "DiagnosisRequest",
    "DiagnosisResponse",
    "Evidence",
    "EvidenceChoice",
    "ExplainRequest",
    "ExplainResponse",
    "HttpError",
    "InfermedicaError",
    "Info",
    "LabTest",
    "MalformedResponse",
    "MissingField",
    "RiskFactor",
    "SearchResult",
    "Sex",
    "Suggestion",
    "SuggestRequest",
    "Symptom",
    "TransportFailure",
    "TriageResponse",
    "api",
    "configuration",
    "configure",
    "reset_configuration",
]
