# infra/analysis_client.py
"""
Client HTTP du service d'analyse externe (scoring + rapports de carrière).

Deux appels, jamais retentés automatiquement :
  analyze_assessment()              POST {SCORING_PATH}
  generate_career_recommendation()  POST {REPORT_PATH} {employeeId}

Toute erreur réseau, timeout, statut non-2xx ou JSON illisible est
convertie en AnalysisServiceError (→ 502 côté router).
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class AnalysisServiceError(Exception):
    """Échec d'un appel au service d'analyse."""


class AnalysisTimeoutError(AnalysisServiceError):
    pass


class AnalysisResponseError(AnalysisServiceError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AnalysisClient:

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 60.0,
        scoring_path: str = "/analyze/assessment",
        report_path: str = "/employee_dashboard/generate-employee-career-recommendation",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.scoring_path = scoring_path
        self.report_path = report_path
        # Injecté par les tests (httpx.MockTransport)
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _post(self, path: str, json_data: Dict) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=json_data, headers=self._headers())
        except httpx.TimeoutException as err:
            logger.warning("Timeout après %ss sur POST %s", self.timeout, url)
            raise AnalysisTimeoutError(
                "The analysis service did not respond in time. Please try again."
            ) from err
        except httpx.TransportError as err:
            logger.warning("Service d'analyse injoignable (%s) : %s", url, err)
            raise AnalysisServiceError(f"Failed to reach the analysis service: {err}") from err

        logger.debug("POST %s → %s", url, response.status_code)

        if response.is_error:
            raise AnalysisResponseError(
                f"API request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as err:
            raise AnalysisResponseError(
                "Invalid response from API - no valid data received",
                status_code=response.status_code,
            ) from err

    async def analyze_assessment(self, payload: Dict) -> List[Dict]:
        """
        Retourne [{part, majorityOptions, maxCount}].
        Accepte {results: [...]} ou la liste directement.
        """
        result = await self._post(self.scoring_path, payload)

        if isinstance(result, dict) and isinstance(result.get("results"), list):
            return result["results"]
        if isinstance(result, list):
            return result

        logger.error("Réponse de scoring invalide : %r", result)
        raise AnalysisResponseError("Invalid response from API - no valid data received")

    async def generate_career_recommendation(self, employee_id: str) -> Any:
        return await self._post(self.report_path, {"employeeId": employee_id})


def get_analysis_client() -> AnalysisClient:
    """Dépendance FastAPI, surchargée dans les tests."""
    return AnalysisClient(
        base_url=settings.ANALYSIS_API_URL,
        token=settings.ANALYSIS_API_TOKEN,
        timeout=settings.ANALYSIS_TIMEOUT_SECONDS,
        scoring_path=settings.SCORING_PATH,
        report_path=settings.REPORT_PATH,
    )
