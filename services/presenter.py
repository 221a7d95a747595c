from typing import List, Optional, Tuple

from models.recommendation import (
    CurrentStatus,
    Recommendation,
    RecommendationResponse,
    RecommendationType,
)
from models.views import (
    CurrentStatusView,
    DetailSection,
    NoticeView,
    RankMarker,
    RecommendationCard,
    ScoreTier,
    StatusLine,
    SummaryView,
)
from services import messages

SCORE_GRADIENTS = {
    ScoreTier.TOP: "from-emerald-500 to-teal-600",
    ScoreTier.HIGH: "from-blue-500 to-indigo-600",
    ScoreTier.MODERATE: "from-amber-500 to-orange-600",
    ScoreTier.LOW: "from-gray-500 to-slate-600",
}

TYPE_LABELS = {
    RecommendationType.BRANCH: messages.TYPE_BRANCH,
    RecommendationType.SPECIALITY: messages.TYPE_SPECIALITY,
    RecommendationType.GRADUATE_PROGRAM: messages.TYPE_GRADUATE_PROGRAM,
}

RANK_MARKERS = (RankMarker.GOLD, RankMarker.SILVER, RankMarker.BRONZE)


def score_tier(match_score: float) -> ScoreTier:
    """Thresholds are inclusive: 85 is top, 70 is high, 50 is moderate."""
    if match_score >= 85:
        return ScoreTier.TOP
    elif match_score >= 70:
        return ScoreTier.HIGH
    elif match_score >= 50:
        return ScoreTier.MODERATE
    else:
        return ScoreTier.LOW


def score_badge_variant(match_score: float) -> str:
    if match_score >= 85:
        return "default"
    if match_score >= 70:
        return "secondary"
    return "outline"


def rank_marker(index: int) -> Tuple[Optional[RankMarker], Optional[str]]:
    """Medal for the first three positions as received from the server."""
    if 0 <= index < len(RANK_MARKERS):
        return RANK_MARKERS[index], messages.RANK_TITLES[index]
    return None, None


def format_score(match_score: float) -> str:
    if float(match_score).is_integer():
        return f"{int(match_score)}%"
    return f"{match_score}%"


def toggle_expanded(current: Optional[str], code: str) -> Optional[str]:
    """Clicking the open card closes it, clicking any other card opens only that one."""
    return None if current == code else code


def detail_sections(rec: Recommendation) -> List[DetailSection]:
    sections = [
        (messages.DETAIL_KEY_SUBJECTS, rec.key_subjects),
        (messages.DETAIL_CAREER_OUTCOMES, rec.career_outcomes),
        (messages.DETAIL_FURTHER_OPTIONS, rec.further_options),
    ]
    return [DetailSection(title=title, items=list(items)) for title, items in sections if items]


def build_card(rec: Recommendation, index: int, expanded_code: Optional[str]) -> RecommendationCard:
    marker, title = rank_marker(index)
    tier = score_tier(rec.match_score)
    expanded = rec.code == expanded_code

    return RecommendationCard(
        code=rec.code,
        name=rec.name,
        type_label=TYPE_LABELS[rec.type],
        rank=index + 1,
        rank_marker=marker,
        rank_title=title,
        match_score=rec.match_score,
        score_text=format_score(rec.match_score),
        score_tier=tier,
        score_gradient=SCORE_GRADIENTS[tier],
        badge_variant=score_badge_variant(rec.match_score),
        reasoning=rec.reasoning,
        expanded=expanded,
        details=detail_sections(rec) if expanded else [],
    )


def build_cards(recommendations: List[Recommendation], expanded_code: Optional[str]) -> List[RecommendationCard]:
    # The server ranks; keep its order as-is
    return [build_card(rec, index, expanded_code) for index, rec in enumerate(recommendations)]


def _first_known(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value:
            return value
    return None


def build_current_status(status: CurrentStatus) -> CurrentStatusView:
    """
    Localized names win over canonical ones; anything missing is shown
    as "unknown" rather than treated as an error.
    """
    lines = [
        StatusLine(label=messages.STATUS_FIELD,
                   value=_first_known(status.field_ar, status.field) or messages.UNKNOWN),
        StatusLine(label=messages.STATUS_MAJOR,
                   value=_first_known(status.major_ar, status.major) or messages.UNKNOWN),
        StatusLine(label=messages.STATUS_SPECIALITY,
                   value=_first_known(status.speciality_ar, status.speciality) or messages.UNKNOWN),
        StatusLine(label=messages.STATUS_ACADEMIC_YEAR,
                   value=status.academic_year or messages.UNKNOWN),
    ]

    average = None
    if status.current_average is not None:
        average = f"{status.current_average:.2f}/20"

    return CurrentStatusView(
        university=_first_known(status.university_ar, status.university),
        lines=lines,
        average=average,
    )


def build_summary(response: RecommendationResponse) -> Optional[SummaryView]:
    if not response.summary:
        return None
    return SummaryView(title=messages.SUMMARY_TITLE, text=response.summary, model=response.model)


def university_unsupported_notice(contribution_url: str) -> NoticeView:
    return NoticeView(
        title=messages.UNIVERSITY_UNSUPPORTED_TITLE,
        message=messages.UNIVERSITY_UNSUPPORTED_MESSAGE,
        link_text=messages.UNIVERSITY_CONTRIBUTE,
        link_url=contribution_url,
    )


def field_unsupported_notice(response: RecommendationResponse, contribution_url: str) -> NoticeView:
    return NoticeView(
        title=messages.FIELD_UNSUPPORTED_TITLE,
        message=response.unsupported_reason or messages.FIELD_UNSUPPORTED_FALLBACK,
        hint=messages.FIELD_UNSUPPORTED_HINT,
        link_text=messages.FIELD_CONTRIBUTE,
        link_url=contribution_url,
    )
