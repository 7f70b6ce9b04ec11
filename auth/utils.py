# backend/auth/utils.py
import jwt
import bcrypt
from datetime import datetime, timedelta, timezone

ALGORITHM = "HS256"

# =====================================================
# 🔹 Password hashing
# =====================================================
def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode()

def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False

# =====================================================
# 🔹 Tokens
# =====================================================
def create_access_token(data: dict, secret: str, expires_hours: int = 24) -> str:
    now = datetime.now(timezone.utc)
    to_encode = data.copy()
    to_encode.update({"iat": now, "exp": now + timedelta(hours=expires_hours)})
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)

def decode_access_token(token: str, secret: str) -> dict:
    """Raises jwt.ExpiredSignatureError / jwt.InvalidTokenError on bad tokens."""
    return jwt.decode(token, secret, algorithms=[ALGORITHM])
