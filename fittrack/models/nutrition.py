# backend/fittrack/models/nutrition.py
from datetime import datetime

from .. import db
from .enums import MEAL_TYPES


class NutritionLog(db.Model):
    __tablename__ = "nutrition_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = db.Column(db.Date, nullable=False)
    total_calories = db.Column(db.Integer)
    total_protein = db.Column(db.Integer)  # g
    total_carbs = db.Column(db.Integer)  # g
    total_fat = db.Column(db.Integer)  # g
    water_intake = db.Column(db.Integer)  # ml
    notes = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", back_populates="nutrition_logs")
    meals = db.relationship(
        "Meal", back_populates="nutrition_log", cascade="all, delete-orphan", passive_deletes=True
    )


class Meal(db.Model):
    __tablename__ = "meals"

    id = db.Column(db.Integer, primary_key=True)
    nutrition_log_id = db.Column(
        db.Integer, db.ForeignKey("nutrition_logs.id", ondelete="CASCADE"), nullable=False
    )
    meal_type = db.Column(db.Enum(*MEAL_TYPES, name="meal_type"), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    calories = db.Column(db.Integer)
    protein = db.Column(db.Numeric(5, 1))  # g
    carbs = db.Column(db.Numeric(5, 1))  # g
    fat = db.Column(db.Numeric(5, 1))  # g
    time = db.Column(db.DateTime)
    notes = db.Column(db.Text)

    nutrition_log = db.relationship("NutritionLog", back_populates="meals")
