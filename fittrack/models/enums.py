# backend/fittrack/models/enums.py

ACCOUNT_TYPES = ("user", "admin", "trainer")
GENDERS = ("male", "female", "other", "prefer_not_to_say")
GOAL_TYPES = (
    "weight_loss",
    "muscle_gain",
    "endurance",
    "strength",
    "flexibility",
    "general_fitness",
)
UNIT_SYSTEMS = ("metric", "imperial")
WORKOUT_TYPES = ("strength", "cardio", "flexibility", "hybrid")
EXERCISE_CATEGORIES = (
    "upper_body",
    "lower_body",
    "core",
    "full_body",
    "cardio",
    "flexibility",
)
MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")

SCOPE_AUTHENTICATION = "authentication"
SCOPE_PASSWORD_RESET = "password-reset"
TOKEN_SCOPES = (SCOPE_AUTHENTICATION, SCOPE_PASSWORD_RESET)

