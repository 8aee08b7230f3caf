from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
DEFAULT_SA_PATH = BASE_DIR / "serviceAccountKey.json"
load_dotenv(ENV_PATH)

class Settings(BaseSettings):
    #FIREBASE
    FIREBASE_PROJECT_ID: str | None = None
    GOOGLE_APPLICATION_CREDENTIALS: str = str(DEFAULT_SA_PATH)
    FIREBASE_SERVICE_ACCOUNT_JSON: str | None = None
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Access guard: "firebase" verifies ID tokens, "header" trusts the role header
    AUTH_MODE: str = Field("firebase", pattern="^(firebase|header)$")
    ROLE_HEADER: str = "user-role"

    # Entity store
    USE_IN_MEMORY_STORE: bool = False
    MEMBERS_COLLECTION: str = "users"
    PROJECTS_COLLECTION: str = "projects"

    # Initial credential issued to new members
    INITIAL_PASSWORD_BYTES: int = Field(12, ge=8, le=48)

    # AWS / S3
    AWS_ACCESS_KEY: str | None = None
    AWS_SECRET_KEY: str | None = None
    AWS_REGION: str | None = None
    S3_ENDPOINT_URL: str | None = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

settings = Settings()
