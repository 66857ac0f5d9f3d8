from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import NotFound
from ..limits import rate_limit
from ..services import users
from .. import schemas

router = APIRouter(prefix="/user", tags=["users"])


def _user_response(message: str, user) -> schemas.UserResponse:
    # UserOut has no password field, so the hash never leaves the store
    return schemas.UserResponse(message=message, user=schemas.UserOut.model_validate(user))


@router.post("/login", response_model=schemas.UserResponse)
@rate_limit("10/minute")
def login(request: Request, payload: schemas.LoginRequest, db: Session = Depends(get_db)):
    user = users.login(db, payload.username, payload.password)
    return _user_response("Login successful", user)


@router.post("/register", response_model=schemas.UserResponse, status_code=201)
@rate_limit("5/minute")
def register(request: Request, payload: schemas.RegisterRequest, db: Session = Depends(get_db)):
    user = users.register(db, payload.username, payload.email, payload.password)
    return _user_response("User registered successfully", user)


@router.put("/update-password", response_model=schemas.UserResponse)
def update_password(payload: schemas.PasswordUpdate, db: Session = Depends(get_db)):
    user = users.update_password(db, payload.id, payload.password)
    if not user:
        raise NotFound("User not found")
    return _user_response("Password updated successfully", user)


@router.delete("/delete/{user_id}", response_model=schemas.MessageOut)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    if not users.delete_user(db, user_id):
        raise NotFound("User not found")
    return schemas.MessageOut(message="User deleted successfully")


@router.get("/{user_id}", response_model=schemas.UserResponse)
def read_user(user_id: str, db: Session = Depends(get_db)):
    user = users.get_user_by_id(db, user_id)
    return _user_response("User retrieved successfully", user)
