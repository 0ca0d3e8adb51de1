"""
PYDANTIC SCHEMAS - Request/response data validation

This file defines the data structures for the scenario analysis API.
The field names are camelCase because they are the wire format shared with
the frontend and with the JSON the model is asked to produce.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisRequest(BaseModel):
    """
    Input schema for the analyze-scenario endpoint.

    Only presence of the scenario is checked; blank text is passed to the model as-is.
    """
    scenario: str = Field(..., description="Free-text description of the situation to analyze")
    constraints: List[str] = Field(default_factory=list, description="Bounding conditions such as budget or deadline")

    @field_validator("constraints", mode="before")
    @classmethod
    def null_constraints_as_empty(cls, v):
        return [] if v is None else v


class AnalysisResponse(BaseModel):
    """
    Output schema for the analyze-scenario endpoint.

    Also used to parse the model's reply, so unknown keys are rejected and
    every field is required.
    """
    model_config = ConfigDict(extra="forbid")

    scenarioSummary: str
    potentialPitfalls: List[str]
    proposedStrategies: List[str]
    recommendedResources: List[str]
    disclaimer: str

    @field_validator("potentialPitfalls", "proposedStrategies", "recommendedResources", mode="before")
    @classmethod
    def blank_string_as_empty_list(cls, v):
        # refusal/clarify replies "leave blank" a list as "" or null
        if v is None or (isinstance(v, str) and not v.strip()):
            return []
        return v

    @field_validator("disclaimer", mode="before")
    @classmethod
    def null_disclaimer_as_blank(cls, v):
        return "" if v is None else v
