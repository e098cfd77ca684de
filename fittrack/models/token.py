# backend/fittrack/models/token.py
from datetime import datetime

from .. import db
from .enums import TOKEN_SCOPES


class Token(db.Model):
    """
    An issued authentication/reset token. Only the SHA-256 of the plaintext
    is stored; the plaintext is handed to the caller once at issuance.
    """

    __tablename__ = "tokens"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    hash = db.Column(db.String(64), unique=True, nullable=False)
    expiry = db.Column(db.DateTime, nullable=False)
    scope = db.Column(db.Enum(*TOKEN_SCOPES, name="token_scope"), nullable=False)

    user = db.relationship("User", back_populates="tokens")

    def is_expired(self, now=None) -> bool:
        return (now or datetime.utcnow()) >= self.expiry

    def is_valid(self, scope: str, now=None) -> bool:
        return self.scope == scope and not self.is_expired(now)
