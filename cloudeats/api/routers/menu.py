# cloudeats/api/routers/menu.py
from fastapi import APIRouter, HTTPException

from cloudeats.api.routers import Int64Path
from cloudeats.domain.ratings import validate_rating
from cloudeats.domain.schemas import RatingAccepted, RatingIn
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.post("/{item_id}/ratings", response_model=RatingAccepted)
def rate_item(item_id: Int64Path, payload: RatingIn):
    result = validate_rating(payload.rating)

    if not result.valid:
        raise HTTPException(status_code=400, detail=result.error)

    logger.info(f"Rating {result.rating} accepted for menu item {item_id}")
    return {"message": "Rating accepted", "itemId": item_id, "rating": result.rating}
