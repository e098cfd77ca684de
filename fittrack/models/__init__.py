from .user import User
from .token import Token
from .profile import UserProfile, WeightHistory, Goal, ProgressPhoto
from .workout import (
    Exercise,
    Workout,
    WorkoutExercise,
    ExerciseSet,
    WorkoutTemplate,
    TemplateExercise,
)
from .nutrition import NutritionLog, Meal

__all__ = [
    "User", "Token",
    "UserProfile", "WeightHistory", "Goal", "ProgressPhoto",
    "Exercise", "Workout", "WorkoutExercise", "ExerciseSet",
    "WorkoutTemplate", "TemplateExercise",
    "NutritionLog", "Meal",
]
