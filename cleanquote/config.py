from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./bookings.db"
    COMPANY_NAME: str = "Central Wisconsin Cleaning Co."
    COMPANY_PHONE: str = ""
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Admin booking list: empty disables the endpoint entirely
    ADMIN_TOKEN: str = ""

    class Config:
        env_file = ".env"


settings = Settings()
