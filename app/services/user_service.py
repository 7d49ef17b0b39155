"""
User service.

Business logic for user management and authentication.
"""

import logging

from sqlmodel import Session

from app.core.errors import AlreadyExistsError, NotFoundError, ValidationError, ValidationField
from app.core.security import get_password_hash, verify_password
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserLogin, UserSignup, UserStatus
from app.services.workout_plan_service import WorkoutPlanService

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)
        self.workout_service = WorkoutPlanService(session)

    def signup(self, data: UserSignup) -> User:
        """
        Register a new user.

        Args:
            data: User registration data

        Returns:
            Created user

        Raises:
            AlreadyExistsError: If email already exists
        """
        # Check if user already exists
        if self.repository.exists_by_email(data.email):
            raise AlreadyExistsError(f"email '{data.email}' is already registered")

        # Create user with hashed password; a concurrent signup still hits the unique index
        user = User(name=data.name, email=data.email, password_hash=get_password_hash(data.password))
        user = self.repository.create(user)
        logger.info("Registered user %d", user.id)
        return user

    def login(self, data: UserLogin) -> User:
        """
        Check credentials.

        Args:
            data: User login credentials

        Returns:
            The authenticated user

        Raises:
            ValidationError: If the email is unknown or the password is wrong
        """
        user = self.repository.get_by_email(data.email)
        if user is None:
            raise ValidationError(ValidationField.INVALID_EMAIL, "the email is not registered")

        if not verify_password(data.password, user.password_hash):
            raise ValidationError(ValidationField.INVALID_PASSWORD, "invalid password")

        return user

    def get_user(self, email: str) -> User:
        """
        Get user by email.

        Raises:
            NotFoundError: If no user has this email
        """
        user = self.repository.get_by_email(email)
        if user is None:
            raise NotFoundError(f"user with email '{email}' not found")
        return user

    def get_status(self, email: str) -> UserStatus:
        """User profile together with all of the user's workout plans."""
        user = self.get_user(email)
        workout_plans = self.workout_service.list_plans(user.id)
        return UserStatus(id=user.id, email=user.email, name=user.name, workout_plans=workout_plans)

    def delete_user(self, email: str) -> None:
        """Delete the account and everything it owns."""
        self.repository.delete_by_email(email)
        logger.info("Deleted user %s", email)
