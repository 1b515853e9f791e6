"""Public operation set of the Infermedica REST API.

Each method performs at most one round trip through Connection and wraps
the JSON it gets back: single resources become model instances, list
endpoints become a dict keyed by item id.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import structlog
from pydantic import ValidationError

from infermedica.connection import Connection
from infermedica.errors import MalformedResponse, MissingField
from infermedica.models import (
    ApiModel,
    Condition,
    DiagnosisResponse,
    ExplainResponse,
    Info,
    LabTest,
    RiskFactor,
    SearchResult,
    Suggestion,
    Symptom,
    TriageResponse,
)

if TYPE_CHECKING:
    import httpx

    from infermedica.models import DiagnosisRequest, ExplainRequest, SuggestRequest

logger = structlog.get_logger()

DEFAULT_SEARCH_MAX_RESULTS = 8

_M = TypeVar("_M", bound=ApiModel)

_OPTIONAL_ARGS = ("endpoint", "model", "interview_id", "timeout", "transport")


class Api:
    """Client for one set of credentials.

    Building an Api never touches the network.

        api = Api(api_id="xxxx", api_key="xxxxxxxx", model="infermedica-en")
        flu = api.get_condition("c_87")
    """

    def __init__(
        self,
        api_id: str | None = None,
        api_key: str | None = None,
        *,
        endpoint: str | None = None,
        model: str | None = None,
        interview_id: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        if not api_id:
            raise ValueError("api_id is required")
        if not api_key:
            raise ValueError("api_key is required")

        optional = {
            "endpoint": endpoint,
            "model": model,
            "interview_id": interview_id,
            "timeout": timeout,
            "transport": transport,
        }
        # Only forward what was supplied, so Connection defaults stay in effect.
        self._connection = Connection(
            api_id, api_key, **{k: v for k, v in optional.items() if v is not None}
        )

    @classmethod
    def from_mapping(cls, args: Any) -> Api:
        """Build from a mapping such as a parsed YAML file. Unknown keys are rejected."""
        if not isinstance(args, Mapping):
            raise TypeError(f"Api arguments must be a mapping, got {type(args).__name__}")
        unknown = set(args) - {"api_id", "api_key", *_OPTIONAL_ARGS}
        if unknown:
            raise ValueError(f"unknown Api arguments: {sorted(unknown)}")
        return cls(**args)

    @property
    def connection(self) -> Connection:
        return self._connection

    # -- knowledge base --------------------------------------------------

    def get_conditions(self, filters: dict[str, Any] | None = None) -> dict[str, dict]:
        return self._get_collection("/conditions", filters)

    def get_condition(self, condition_id: str) -> Condition:
        response = self._connection.get(_item_path("/conditions", condition_id))
        return self._parse(Condition, response)

    def get_lab_tests(self) -> dict[str, dict]:
        return self._get_collection("/lab_tests")

    def get_lab_test(self, lab_test_id: str) -> LabTest:
        return self._parse(LabTest, self._connection.get(_item_path("/lab_tests", lab_test_id)))

    def get_risk_factors(self, filters: dict[str, Any] | None = None) -> dict[str, dict]:
        return self._get_collection("/risk_factors", filters)

    def get_covid_risk_factors(self) -> dict[str, dict]:
        return self._get_collection("/covid19/risk_factors")

    def get_risk_factor(
        self, risk_factor_id: str, filters: dict[str, Any] | None = None
    ) -> RiskFactor:
        response = self._connection.get(_item_path("/risk_factors", risk_factor_id), filters)
        return self._parse(RiskFactor, response)

    def get_symptoms(self, filters: dict[str, Any] | None = None) -> dict[str, dict]:
        return self._get_collection("/symptoms", filters)

    def get_covid_symptoms(self) -> dict[str, dict]:
        return self._get_collection("/covid19/symptoms")

    def get_symptom(self, symptom_id: str, filters: dict[str, Any] | None = None) -> Symptom:
        response = self._connection.get(_item_path("/symptoms", symptom_id), filters)
        return self._parse(Symptom, response)

    def get_info(self) -> Info:
        """API version, knowledge-base update date and item counts."""
        return self._parse(Info, self._connection.get("/info"))

    # -- interview -------------------------------------------------------

    def diagnosis(self, request: DiagnosisRequest) -> DiagnosisResponse:
        """Submit evidence; the response carries ranked conditions and the next question."""
        response = self._connection.post("/diagnosis", request.to_json())
        return self._parse(DiagnosisResponse, response)

    def covid19_diagnosis(self, request: DiagnosisRequest) -> DiagnosisResponse:
        response = self._connection.post("/covid19/diagnosis", request.with_bare_age().to_json())
        return self._parse(DiagnosisResponse, response)

    def triage(self, request: DiagnosisRequest) -> TriageResponse:
        response = self._connection.post("/triage", request.to_json())
        return self._parse(TriageResponse, response)

    def covid19_triage(self, request: DiagnosisRequest) -> TriageResponse:
        response = self._connection.post("/covid19/triage", request.with_bare_age().to_json())
        return self._parse(TriageResponse, response)

    def explain(
        self, request: ExplainRequest, filters: dict[str, Any] | None = None
    ) -> ExplainResponse:
        """Evidence for and against ``request.target``.

        Raises MissingField without contacting the API when no target is set.
        """
        if getattr(request, "target", None) is None:
            raise MissingField("target must be set")
        response = self._connection.post("/explain", request.to_json(), filters)
        return self._parse(ExplainResponse, response)

    def search(self, phrase: str, filters: dict[str, Any] | None = None) -> list[SearchResult]:
        """Look up observations by phrase, e.g. ``search("headache", {"sex": "male"})``."""
        if not phrase:
            raise ValueError("phrase must be a non-empty string")
        params: dict[str, Any] = {"phrase": phrase, **(filters or {})}
        params.setdefault("max_results", DEFAULT_SEARCH_MAX_RESULTS)
        return self._parse_list(SearchResult, self._connection.get("/search", params))

    def related_symptoms(self, request: SuggestRequest) -> list[Suggestion]:
        return self._parse_list(Suggestion, self._connection.post("/suggest", request.to_json()))

    # -- helpers ---------------------------------------------------------

    def _get_collection(self, path: str, filters: dict[str, Any] | None = None) -> dict[str, dict]:
        """GET a list endpoint and index the items by id (last duplicate wins)."""
        response = self._connection.get(path, filters)
        if not isinstance(response, list) or not all(
            isinstance(item, dict) and "id" in item for item in response
        ):
            raise self._malformed(response)
        collection = {item["id"]: item for item in response}
        logger.debug("infermedica_collection", path=path, count=len(collection))
        return collection

    def _parse(self, model: type[_M], payload: Any) -> _M:
        try:
            return model.from_response(payload)
        except ValidationError as exc:
            raise self._malformed(payload) from exc

    def _parse_list(self, model: type[_M], payload: Any) -> list[_M]:
        if not isinstance(payload, list):
            raise self._malformed(payload)
        return [self._parse(model, item) for item in payload]

    def _malformed(self, payload: Any) -> MalformedResponse:
        conn = self._connection
        logger.warning("infermedica_unexpected_shape", path=conn.last_path)
        return MalformedResponse(conn.last_status, conn.last_path, json.dumps(payload))

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> Api:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _item_path(prefix: str, item_id: str) -> str:
    return f"{prefix}/{quote(str(item_id), safe='')}"
