# backend/config.py
import os
from datetime import timedelta


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "mysql+pymysql://root:@localhost/fittrack"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 🔐 password hashing (werkzeug method string, "<algo>:<hash>:<iterations>")
    PASSWORD_HASH_METHOD = os.environ.get("PASSWORD_HASH_METHOD", "pbkdf2:sha256:600000")

    # opaque tokens stored in the tokens table
    AUTH_TOKEN_TTL = timedelta(hours=24)
    PASSWORD_RESET_TOKEN_TTL = timedelta(minutes=45)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    # cheap hash so the suite stays fast
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    LOG_LEVEL = "DEBUG"
