# backend/fittrack/models/user.py
from datetime import datetime

from sqlalchemy import func
from werkzeug.security import check_password_hash, generate_password_hash

from .. import db
from .enums import ACCOUNT_TYPES, UNIT_SYSTEMS


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Uuid, primary_key=True)
    email = db.Column(db.String(255), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    account_type = db.Column(
        db.Enum(*ACCOUNT_TYPES, name="account_type"), nullable=False, default="user"
    )
    active = db.Column(db.Boolean, default=True, nullable=False)
    preferred_unit_system = db.Column(
        db.Enum(*UNIT_SYSTEMS, name="unit_system"), default="metric"
    )
    last_login = db.Column(db.DateTime)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Owned rows. The foreign keys carry ON DELETE CASCADE, so the ORM leaves
    # the deletes to the database (passive_deletes).
    tokens = db.relationship(
        "Token", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    profile = db.relationship(
        "UserProfile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    weight_history = db.relationship(
        "WeightHistory", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    goals = db.relationship(
        "Goal", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    workouts = db.relationship(
        "Workout", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    workout_templates = db.relationship(
        "WorkoutTemplate", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    nutrition_logs = db.relationship(
        "NutritionLog", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    progress_photos = db.relationship(
        "ProgressPhoto", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    # Authored exercises outlive their creator (creator_id is SET NULL).
    authored_exercises = db.relationship(
        "Exercise", back_populates="creator", passive_deletes=True
    )

    def set_password(self, password: str, method: str) -> None:
        self.password_hash = generate_password_hash(password, method=method)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            "id": str(self.id),
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "account_type": self.account_type,
            "active": self.active,
            "preferred_unit_system": self.preferred_unit_system,
            "last_login": self.last_login.isoformat() if self.last_login else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


# emails are unique regardless of case; the stored value keeps its case
db.Index("ix_users_email_lower", func.lower(User.email), unique=True)
