"""
Library configuration management.
"""

from pydantic_settings import BaseSettings

from feedback.services.propagation import RecordMode


class Settings(BaseSettings):
    """Settings loaded from FEEDBACK_* environment variables."""
    
    # Propagation
    record_mode: RecordMode = RecordMode.FRESH
    full_paths: bool = False  # Keep directories in stamped file names
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_prefix = "FEEDBACK_"
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
