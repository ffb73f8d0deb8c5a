from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the approval functions"""

    # Application settings
    service_name: str = "approval-functions"
    log_level: str = "INFO"
    environment: str = "dev"

    # Firebase settings
    firebase_secret: Optional[str] = None  # service account JSON, ADC when unset
    functions_region: str = "us-central1"

    # Firestore paths
    users_document_path: str = "Users/{uid}"
    admin_audit_collection: str = "adminAudit"
    notifications_collection: str = "notifications"

    # Approval push content
    approval_title: str = "Approval Complete"
    approval_body: str = "Your account has been approved."

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Create settings instance
settings = Settings()
