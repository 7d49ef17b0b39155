"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlalchemy import delete, select as sa_select
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.errors import AlreadyExistsError, NotFoundError
from app.db.session import transaction
from app.models.exercise_plan import ExercisePlan
from app.models.user import User
from app.models.workout_plan import WorkoutPlan


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id

        Raises:
            AlreadyExistsError: If the email is already taken
        """
        try:
            with transaction(self.session):
                self.session.add(user)
        except IntegrityError as e:
            raise AlreadyExistsError(f"user with email '{user.email}' already exists") from e
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None

    def delete_by_email(self, email: str) -> None:
        """
        Delete a user together with their workout plans and exercise plans.

        Runs as one transaction: exercise plans first, then workout plans,
        then the user row.

        Args:
            email: Email of the user to delete

        Raises:
            NotFoundError: If no user has this email
        """
        user = self.get_by_email(email)
        if user is None:
            raise NotFoundError(f"user with email '{email}' not found")

        with transaction(self.session):
            plan_ids = sa_select(WorkoutPlan.id).where(WorkoutPlan.user_id == user.id)
            self.session.execute(delete(ExercisePlan).where(ExercisePlan.workout_plan_id.in_(plan_ids)))
            self.session.execute(delete(WorkoutPlan).where(WorkoutPlan.user_id == user.id))
            self.session.delete(user)
