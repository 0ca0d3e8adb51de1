"""
ANALYZE ROUTE - Scenario analysis endpoint

Takes a scenario and its constraints, runs them through the analyzer and
returns the five-field analysis. The response is always HTTP 200 for a valid
body: failures are reported inside the body, with scenarioSummary starting
with "Error:".
"""

from fastapi import APIRouter, Depends
from analyzer.schemas import AnalysisRequest, AnalysisResponse
from analyzer.services.llm import ScenarioAnalyzer, get_analyzer
from analyzer.utils import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/analyze-scenario", response_model=AnalysisResponse)
def analyze_scenario(payload: AnalysisRequest, analyzer: ScenarioAnalyzer = Depends(get_analyzer)):
    """
    Analyze a scenario under a list of constraints.

    Input: {"scenario": str, "constraints": [str, ...]}
    Output: scenarioSummary, potentialPitfalls, proposedStrategies,
            recommendedResources, disclaimer
    """
    logger.info(f"[analyze_scenario] constraints={len(payload.constraints)} scenario_chars={len(payload.scenario)}")
    return analyzer.analyze(payload)
