# models/views.py
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional


class GateStatus(str, Enum):
    LOADING = "loading"
    REDIRECT = "redirect"
    OPEN = "open"


class RenderBranch(str, Enum):
    """Which block of the recommendations page is shown."""
    LOADING = "loading"
    EMPTY = "empty"
    ERROR = "error"
    UNIVERSITY_UNSUPPORTED = "university_unsupported"
    FIELD_UNSUPPORTED = "field_unsupported"
    RESULTS = "results"


class ScoreTier(str, Enum):
    TOP = "top"
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class RankMarker(str, Enum):
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


class DetailSection(BaseModel):
    title: str
    items: List[str]


class RecommendationCard(BaseModel):
    code: str
    name: str
    type_label: str
    rank: int
    rank_marker: Optional[RankMarker] = None
    rank_title: Optional[str] = None
    match_score: float
    score_text: str
    score_tier: ScoreTier
    score_gradient: str
    badge_variant: str
    reasoning: str
    expanded: bool = False
    details: List[DetailSection] = Field(default_factory=list)


class StatusLine(BaseModel):
    label: str
    value: str


class CurrentStatusView(BaseModel):
    university: Optional[str] = None
    lines: List[StatusLine] = Field(default_factory=list)
    average: Optional[str] = None


class SummaryView(BaseModel):
    title: str
    text: str
    model: Optional[str] = None


class NoticeView(BaseModel):
    title: str
    message: str
    hint: Optional[str] = None
    link_text: str
    link_url: str


class TriggerView(BaseModel):
    label: str
    disabled: bool


class PageView(BaseModel):
    """Everything needed to draw the recommendations page for one render."""
    gate: GateStatus
    redirect_to: Optional[str] = None
    loading_label: Optional[str] = None

    title: Optional[str] = None
    subtitle: Optional[str] = None
    preference_label: Optional[str] = None
    preference_placeholder: Optional[str] = None
    career_preference: str = ""
    trigger: Optional[TriggerView] = None

    branch: Optional[RenderBranch] = None
    skeletons: int = 0
    empty_title: Optional[str] = None
    empty_message: Optional[str] = None
    notice: Optional[NoticeView] = None
    current_status: Optional[CurrentStatusView] = None
    error: Optional[str] = None
    summary: Optional[SummaryView] = None
    cards: List[RecommendationCard] = Field(default_factory=list)
