from typing import Optional

from models.recommendation import RecommendationResponse
from models.views import RenderBranch


def classify(is_loading: bool, error: Optional[str],
             response: Optional[RecommendationResponse]) -> RenderBranch:
    """
    Picks the single block the page shows, first match wins:

    1. a request is in flight               -> LOADING
    2. nothing fetched yet, no error        -> EMPTY
    3. nothing fetched yet, but an error    -> ERROR
    4. university not supported             -> UNIVERSITY_UNSUPPORTED
    5. university ok, field not supported   -> FIELD_UNSUPPORTED
    6. both supported                       -> RESULTS (a stale error may show too)

    "Unsupported" answers are successful responses, not errors.
    """
    if is_loading:
        return RenderBranch.LOADING

    if response is None:
        return RenderBranch.ERROR if error else RenderBranch.EMPTY

    if not response.university_supported:
        return RenderBranch.UNIVERSITY_UNSUPPORTED

    if not response.field_supported:
        return RenderBranch.FIELD_UNSUPPORTED

    return RenderBranch.RESULTS
