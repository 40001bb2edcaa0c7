"""/api/v1/users - user administration and login"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import LoginRequest, MessageResponse, UserCreate, UserResponse, UserUpdate
from tender_crm.infrastructure.database.session import get_db
from tender_crm.services.users import UserService

router = APIRouter()


def _user_list(users) -> List[UserResponse]:
    return [UserResponse.model_validate(u) for u in users]


@router.post("/users/login", response_model=UserResponse)
def login(request_body: LoginRequest, db: Session = Depends(get_db)):
    """
    Simplified credential check.

    Returns:
        The matching user profile, or 401 on bad credentials
    """
    user = UserService(db).authenticate(request_body.username, request_body.password)
    return UserResponse.model_validate(user)


@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return _user_list(UserService(db).list())


@router.post("/users", response_model=List[UserResponse], status_code=201)
def create_user(request_body: UserCreate, db: Session = Depends(get_db)):
    return _user_list(UserService(db).create(request_body))


@router.put("/users/{user_id}", response_model=List[UserResponse])
def update_user(user_id: str, request_body: UserUpdate, db: Session = Depends(get_db)):
    return _user_list(UserService(db).update(user_id, request_body))


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    UserService(db).delete(user_id)
    return MessageResponse(message="User removed")
