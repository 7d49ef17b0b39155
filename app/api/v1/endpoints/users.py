"""
User endpoints.

Signup, login, logout, account status and account deletion.
"""

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_token_service
from app.core.errors import ValidationError, ValidationField
from app.core.security import AuthContext, TokenService
from app.db.session import get_db
from app.schemas.common import SuccessCode, SuccessResponse
from app.schemas.user import LoginPayload, Token, UserLogin, UserSignup, UserStatusPayload
from app.services.user_service import UserService

router = APIRouter()


@router.post("/signup", summary="Register a new user.", response_model=SuccessResponse[None],
             response_model_exclude_none=True, status_code=status.HTTP_201_CREATED, )
def signup(data: UserSignup, db: Session = Depends(get_db)):
    """
    Register a new user.

    Raises:
        AlreadyExistsError: If the email is already registered (409)
    """
    UserService(db).signup(data)
    return SuccessResponse[None](code=SuccessCode.CREATED, message="user created")


@router.post("/login", summary="User login endpoint via JSON.", response_model=SuccessResponse[LoginPayload])
def login(data: UserLogin, db: Session = Depends(get_db),
          token_service: TokenService = Depends(get_token_service), ):
    user = UserService(db).login(data)
    access_token = token_service.create_access_token(user.id, user.email, user.name)
    return SuccessResponse[LoginPayload](code=SuccessCode.FETCH, message="login successful",
                                         payload=LoginPayload(access_token=access_token))


@router.post("/token", summary="User login endpoint via OAuth2 form (for Swagger UI).", response_model=Token)
def login_form(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db),
               token_service: TokenService = Depends(get_token_service), ):
    """
    Authenticate user via OAuth2 form.

    Use email as username.
    """
    try:
        credentials = UserLogin(email=form_data.username, password=form_data.password)
    except PydanticValidationError:
        raise ValidationError(ValidationField.INVALID_EMAIL, "username must be an email address")
    user = UserService(db).login(credentials)
    return Token(access_token=token_service.create_access_token(user.id, user.email, user.name))


@router.post("/logout", summary="Revoke the current access token.", status_code=status.HTTP_204_NO_CONTENT, )
def logout(user: AuthContext = Depends(get_current_user), token_service: TokenService = Depends(get_token_service), ):
    token_service.blacklist_token(user.jti, user.expires_at)


@router.get("/status", summary="Current user with all workout plans.",
            response_model=SuccessResponse[UserStatusPayload])
def user_status(db: Session = Depends(get_db), user: AuthContext = Depends(get_current_user), ):
    user_status = UserService(db).get_status(user.email)
    return SuccessResponse[UserStatusPayload](code=SuccessCode.FETCH, message="user status",
                                              payload=UserStatusPayload(user_status=user_status))


@router.delete("", summary="Delete the current user and all of its data.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_user(db: Session = Depends(get_db), user: AuthContext = Depends(get_current_user),
                token_service: TokenService = Depends(get_token_service), ):
    UserService(db).delete_user(user.email)
    token_service.blacklist_token(user.jti, user.expires_at)
