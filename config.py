# backend/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

# ============================================================
# 🌍 DETECT ENVIRONMENT AND LOAD MATCHING .env
# ============================================================
ENV = os.getenv("ENV", "production" if "PASSENGER_ENV" in os.environ else "development")

env_file = ".env.production" if ENV == "production" else ".env.development"
load_dotenv(BASE_DIR / env_file)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


# ============================================================
# ⚙️ GENERAL SETTINGS
# ============================================================
class Settings:
    """Environment-sourced configuration.

    Built once by the entrypoint and handed to each service. Keyword
    arguments override the environment, which is how tests configure it.
    """

    def __init__(self, **overrides):
        self.PROJECT_NAME: str = os.getenv("PROJECT_NAME", "VirtuaMod")
        self.VERSION: str = os.getenv("VERSION", "1.0")
        self.ENV: str = ENV

        # 🔹 Mongo
        self.MONGO_URI: str = os.getenv("MONGO_URI")
        self.MONGO_USER: str = os.getenv("MONGO_USER")
        self.MONGO_PASSWORD: str = os.getenv("MONGO_PASSWORD")
        self.MONGO_HOST: str = os.getenv("MONGO_HOST", "localhost")
        self.MONGO_PORT: str = os.getenv("MONGO_PORT", "27017")
        self.MONGO_DB: str = os.getenv("MONGO_DB", "virtuamod")

        # 🔹 Credentials and tokens
        self.JWT_SECRET: str = os.getenv("JWT_SECRET")
        self.SALT: int = _env_int("SALT", 10)
        self.TOKEN_TTL_HOURS: int = _env_int("TOKEN_TTL_HOURS", 24)

        # 🔹 Mail relay (Brevo)
        self.EMAIL_USER: str = os.getenv("EMAIL_USER")
        self.BREVO_API_KEY: str = os.getenv("BREVO_API_KEY")
        self.CONTACT_INBOX: str = os.getenv("CONTACT_INBOX")
        self.LOGO_PATH: str = os.getenv("LOGO_PATH", str(BASE_DIR / "assets" / "logo.png"))
        self.MAIL_TIMEOUT: int = _env_int("MAIL_TIMEOUT", 15)

        # 🔹 Server
        self.PORT: int = _env_int("PORT", 8080)
        self.ALLOWED_ORIGINS: list = os.getenv("ALLOWED_ORIGINS", "*").split(",")

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)

        if not self.CONTACT_INBOX:
            self.CONTACT_INBOX = self.EMAIL_USER
        if not 4 <= self.SALT <= 31:
            raise ValueError(f"SALT must be between 4 and 31 bcrypt rounds, got {self.SALT}")

    @property
    def DEBUG(self) -> bool:
        return self.ENV == "development"


settings = Settings()
