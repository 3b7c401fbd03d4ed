# routes/user.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog.database.database import get_db
from catalog.database.dependencies import get_token_issuer
from catalog.services.user import UserService
from catalog.models.schemas.base import TokenResponse
from catalog.models.schemas.user import Credentials, UserCreatedResponse
from catalog.utils.tokens import TokenIssuer

router = APIRouter(tags=["users"])


@router.post(
    "/signup",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    data: Credentials,
    db: Session = Depends(get_db)
):
    """Register a new user."""
    service = UserService(db)
    user = await service.create(data)
    return UserCreatedResponse(data=user)


@router.post("/signin", response_model=TokenResponse)
async def signin(
    data: Credentials,
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer)
):
    """Exchange mail and password for a bearer token."""
    service = UserService(db)
    await service.authenticate(data.mail, data.password)
    return TokenResponse(state=True, message="Logged In", token=issuer.issue(data.password))
