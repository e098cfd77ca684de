# backend/fittrack/models/profile.py
from datetime import datetime

from .. import db
from .enums import GENDERS, GOAL_TYPES


def _num(value):
    return float(value) if value is not None else None


def _iso(value):
    return value.isoformat() if value else None


# -----------------------------
# Profile (1:1 with users)
# -----------------------------
class UserProfile(db.Model):
    __tablename__ = "user_profiles"
    __table_args__ = (
        db.CheckConstraint(
            "activity_level IS NULL OR activity_level BETWEEN 1 AND 5",
            name="ck_user_profiles_activity_level",
        ),
    )

    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    date_of_birth = db.Column(db.Date)
    gender = db.Column(db.Enum(*GENDERS, name="gender"))
    height = db.Column(db.Numeric(5, 2))  # cm
    current_weight = db.Column(db.Numeric(5, 2))  # kg
    target_weight = db.Column(db.Numeric(5, 2))  # kg
    activity_level = db.Column(db.Integer)
    bio = db.Column(db.Text)
    profile_picture_url = db.Column(db.String(255))
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", back_populates="profile")

    def to_dict(self):
        return {
            "user_id": str(self.user_id),
            "date_of_birth": _iso(self.date_of_birth),
            "gender": self.gender,
            "height": _num(self.height),
            "current_weight": _num(self.current_weight),
            "target_weight": _num(self.target_weight),
            "activity_level": self.activity_level,
            "bio": self.bio,
            "profile_picture_url": self.profile_picture_url,
        }


class WeightHistory(db.Model):
    __tablename__ = "weight_history"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    weight = db.Column(db.Numeric(5, 2), nullable=False)  # kg
    date = db.Column(db.Date, nullable=False)
    notes = db.Column(db.Text)

    user = db.relationship("User", back_populates="weight_history")


# -----------------------------
# Goals
# -----------------------------
class Goal(db.Model):
    __tablename__ = "goals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    goal_type = db.Column(db.Enum(*GOAL_TYPES, name="goal_type"), nullable=False)
    target_value = db.Column(db.Numeric(8, 2))  # kg, km, ...
    current_value = db.Column(db.Numeric(8, 2))
    start_date = db.Column(db.Date, nullable=False)
    target_date = db.Column(db.Date)
    completed = db.Column(db.Boolean, default=False, nullable=False)
    completed_at = db.Column(db.DateTime)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", back_populates="goals")

    def mark_completed(self, now=None) -> None:
        # one-way: a completed goal keeps its original completed_at
        if self.completed:
            return
        self.completed = True
        self.completed_at = now or datetime.utcnow()

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "goal_type": self.goal_type,
            "target_value": _num(self.target_value),
            "current_value": _num(self.current_value),
            "start_date": _iso(self.start_date),
            "target_date": _iso(self.target_date),
            "completed": self.completed,
            "completed_at": _iso(self.completed_at),
        }


# -----------------------------
# Progress photos
# -----------------------------
class ProgressPhoto(db.Model):
    __tablename__ = "progress_photos"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    photo_url = db.Column(db.String(255), nullable=False)
    date = db.Column(db.Date, nullable=False)
    category = db.Column(db.String(50))  # front, back, side, ...
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    user = db.relationship("User", back_populates="progress_photos")
