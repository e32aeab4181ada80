from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "Talent96"
    APP_ENV: str = "dev"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    SECRET_KEY: str = "change_me_please"
    # Session tokens carry no expiry unless this is set
    ACCESS_TOKEN_EXPIRE_MINUTES: int | None = None
    BCRYPT_ROUNDS: int = 10

    OTP_TTL_SECONDS: int = 180
    RECOMMENDATION_LIMIT: int = 10

    DATABASE_URL: str = "sqlite:///./talent96.db"

    BACKEND_CORS_ORIGINS: str = "*"

    # Outgoing mail; when SMTP_HOST is empty messages are only logged
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASS: str = ""
    MAIL_FROM: str = "Talent96 <no-reply@talent96.com>"

settings = Settings()
