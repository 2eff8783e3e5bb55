from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cloudeats.api.routers import Int64Path
from cloudeats.data.database import get_db
from cloudeats.domain.errors import NotFound, StoreFailure
from cloudeats.domain.schemas import UserProfile
from cloudeats.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=UserProfile)
def get_user(user_id: Int64Path, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.get_user(user_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Database error")
