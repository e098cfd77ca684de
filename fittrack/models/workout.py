# backend/fittrack/models/workout.py
from datetime import datetime

from .. import db
from .enums import EXERCISE_CATEGORIES, WORKOUT_TYPES


# -----------------------------
# Exercise library
# -----------------------------
class Exercise(db.Model):
    __tablename__ = "exercises"
    __table_args__ = (
        db.CheckConstraint(
            "difficulty IS NULL OR difficulty BETWEEN 1 AND 5",
            name="ck_exercises_difficulty",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    instructions = db.Column(db.Text)
    category = db.Column(
        db.Enum(*EXERCISE_CATEGORIES, name="exercise_category"), nullable=False
    )
    primary_muscles = db.Column(db.JSON, default=list)
    secondary_muscles = db.Column(db.JSON, default=list)
    equipment = db.Column(db.JSON, default=list)
    difficulty = db.Column(db.Integer)
    video_url = db.Column(db.String(255))
    image_url = db.Column(db.String(255))
    is_custom = db.Column(db.Boolean, default=False, nullable=False)
    # NULL for system exercises; authored ones survive their creator
    creator_id = db.Column(db.Uuid, db.ForeignKey("users.id", ondelete="SET NULL"))

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    creator = db.relationship("User", back_populates="authored_exercises")

    @property
    def is_system(self) -> bool:
        return self.creator_id is None

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "primary_muscles": self.primary_muscles or [],
            "secondary_muscles": self.secondary_muscles or [],
            "equipment": self.equipment or [],
            "difficulty": self.difficulty,
            "is_custom": self.is_custom,
            "creator_id": str(self.creator_id) if self.creator_id else None,
        }


# -----------------------------
# Workouts
# -----------------------------
class Workout(db.Model):
    __tablename__ = "workouts"
    __table_args__ = (
        db.CheckConstraint(
            "rating IS NULL OR rating BETWEEN 1 AND 5", name="ck_workouts_rating"
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    workout_type = db.Column(db.Enum(*WORKOUT_TYPES, name="workout_type"), nullable=False)
    duration = db.Column(db.Integer)  # minutes
    calories_burned = db.Column(db.Integer)
    date = db.Column(db.Date, nullable=False)
    start_time = db.Column(db.DateTime)
    end_time = db.Column(db.DateTime)
    notes = db.Column(db.Text)
    rating = db.Column(db.Integer)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", back_populates="workouts")
    exercises = db.relationship(
        "WorkoutExercise",
        back_populates="workout",
        order_by="WorkoutExercise.order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def to_summary_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "workout_type": self.workout_type,
            "date": self.date.isoformat() if self.date else None,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "duration": self.duration,
            "calories_burned": self.calories_burned,
            "rating": self.rating,
        }


class WorkoutExercise(db.Model):
    __tablename__ = "workout_exercises"
    __table_args__ = (
        # one exercise per slot within a workout
        db.UniqueConstraint("workout_id", "order", name="uq_workout_exercises_order"),
    )

    id = db.Column(db.Integer, primary_key=True)
    workout_id = db.Column(
        db.Integer, db.ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id = db.Column(
        db.Integer, db.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    order = db.Column(db.Integer, nullable=False)  # sequence within the parent
    sets = db.Column(db.Integer)
    target_reps = db.Column(db.Integer)
    target_duration = db.Column(db.Integer)  # seconds
    rest_between_sets = db.Column(db.Integer)  # seconds
    notes = db.Column(db.Text)

    workout = db.relationship("Workout", back_populates="exercises")
    exercise = db.relationship("Exercise")
    performed_sets = db.relationship(
        "ExerciseSet",
        back_populates="workout_exercise",
        order_by="ExerciseSet.set_number",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ExerciseSet(db.Model):
    __tablename__ = "exercise_sets"
    __table_args__ = (
        db.CheckConstraint("rpe IS NULL OR rpe BETWEEN 1 AND 10", name="ck_exercise_sets_rpe"),
    )

    id = db.Column(db.Integer, primary_key=True)
    workout_exercise_id = db.Column(
        db.Integer, db.ForeignKey("workout_exercises.id", ondelete="CASCADE"), nullable=False
    )
    set_number = db.Column(db.Integer, nullable=False)
    weight = db.Column(db.Numeric(6, 2))  # kg
    reps = db.Column(db.Integer)
    duration = db.Column(db.Integer)  # seconds
    distance = db.Column(db.Numeric(6, 2))  # km / miles
    completed = db.Column(db.Boolean, default=True, nullable=False)
    rpe = db.Column(db.Integer)  # rate of perceived exertion
    notes = db.Column(db.Text)

    workout_exercise = db.relationship("WorkoutExercise", back_populates="performed_sets")


# -----------------------------
# Templates
# -----------------------------
class WorkoutTemplate(db.Model):
    __tablename__ = "workout_templates"
    __table_args__ = (
        db.CheckConstraint(
            "difficulty IS NULL OR difficulty BETWEEN 1 AND 5",
            name="ck_workout_templates_difficulty",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    workout_type = db.Column(db.Enum(*WORKOUT_TYPES, name="workout_type"), nullable=False)
    estimated_duration = db.Column(db.Integer)  # minutes
    difficulty = db.Column(db.Integer)
    is_public = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", back_populates="workout_templates")
    exercises = db.relationship(
        "TemplateExercise",
        back_populates="template",
        order_by="TemplateExercise.order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class TemplateExercise(db.Model):
    __tablename__ = "template_exercises"
    __table_args__ = (
        db.UniqueConstraint("template_id", "order", name="uq_template_exercises_order"),
    )

    id = db.Column(db.Integer, primary_key=True)
    template_id = db.Column(
        db.Integer, db.ForeignKey("workout_templates.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id = db.Column(
        db.Integer, db.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    order = db.Column(db.Integer, nullable=False)  # sequence within the parent
    sets = db.Column(db.Integer)
    target_reps = db.Column(db.Integer)
    target_duration = db.Column(db.Integer)  # seconds
    rest_between_sets = db.Column(db.Integer)  # seconds
    notes = db.Column(db.Text)

    template = db.relationship("WorkoutTemplate", back_populates="exercises")
    exercise = db.relationship("Exercise")
