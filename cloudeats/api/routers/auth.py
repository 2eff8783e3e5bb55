# cloudeats/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cloudeats.data.database import get_db
from cloudeats.domain.errors import Conflict, InvalidCredentials, StoreFailure
from cloudeats.domain.schemas import LoginIn, UserCreate, UserEnvelope
from cloudeats.services.user_service import UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=UserEnvelope, status_code=201)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        user = service.register(payload)
    except Conflict as e:
        raise HTTPException(status_code=409, detail=str(e))
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Registration failed")
    return {"message": "User registered successfully", "user": user}


@router.post("/login", response_model=UserEnvelope)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        user = service.login(payload)
    except InvalidCredentials as e:
        raise HTTPException(status_code=401, detail=str(e))
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Login failed")
    return {"message": "Login successful", "user": user}
