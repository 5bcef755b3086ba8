import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application Settings
    app_name: str = os.getenv("APP_NAME", "Simple Library Management System")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Lending Settings
    loan_period_days: int = int(os.getenv("LOAN_PERIOD_DAYS", "14"))
    fine_per_day: float = float(os.getenv("FINE_PER_DAY", "5.0"))

    # Security Settings
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Feature Flags
    seed_sample_data: bool = os.getenv("SEED_SAMPLE_DATA", "True").lower() in ("true", "1", "yes")


settings = Settings()
