# models/recommendation.py
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional


class WireModel(BaseModel):
    """Base for payloads exchanged with the recommendation backend (camelCase on the wire)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class RecommendationType(str, Enum):
    """Kind of option being recommended, as sent by the backend."""
    BRANCH = "major"
    SPECIALITY = "speciality"
    GRADUATE_PROGRAM = "master_speciality"


class RecommendationRequest(WireModel):
    career_preference: Optional[str] = None

    def to_payload(self) -> dict:
        # careerPreference is left out entirely when there is none
        return self.model_dump(by_alias=True, exclude_none=True)


class CurrentStatus(WireModel):
    """Snapshot of where the student currently is in the LMD system."""
    university: Optional[str] = None
    university_ar: Optional[str] = None
    field: Optional[str] = None
    field_ar: Optional[str] = None
    major: Optional[str] = None
    major_ar: Optional[str] = None
    speciality: Optional[str] = None
    speciality_ar: Optional[str] = None
    level: Optional[str] = None
    level_ar: Optional[str] = None
    current_average: Optional[float] = None  # out of 20
    academic_year: Optional[str] = None


class Recommendation(WireModel):
    code: str
    name: str
    type: RecommendationType = RecommendationType.GRADUATE_PROGRAM
    match_score: float = 0
    reasoning: str = ""
    key_subjects: List[str] = Field(default_factory=list)
    career_outcomes: List[str] = Field(default_factory=list)
    further_options: List[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def unknown_type_is_graduate(cls, value):
        # Anything that is not a branch or a speciality is shown as a master's option
        try:
            return RecommendationType(value)
        except ValueError:
            return RecommendationType.GRADUATE_PROGRAM

    @field_validator("key_subjects", "career_outcomes", "further_options", mode="before")
    @classmethod
    def null_list_is_empty(cls, value):
        return value or []


class RecommendationResponse(WireModel):
    current_status: CurrentStatus = Field(default_factory=CurrentStatus)
    recommendations: List[Recommendation] = Field(default_factory=list)
    summary: Optional[str] = None
    model: Optional[str] = None
    university_supported: bool
    fallback_university: Optional[str] = None
    field_supported: bool = False
    unsupported_reason: Optional[str] = None

    @field_validator("current_status", mode="before")
    @classmethod
    def null_status_is_unknown(cls, value):
        return value if value is not None else {}

    @field_validator("recommendations", mode="before")
    @classmethod
    def null_list_is_empty(cls, value):
        return value or []

    @property
    def fully_supported(self) -> bool:
        return self.university_supported and self.field_supported
