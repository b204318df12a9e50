"""
Core configuration for the S3 Object Gateway.
Manages environment variables and AWS service settings.
"""
import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""
    
    # AWS Configuration
    aws_access_key_id: str = os.getenv("AWS_ACCESS_KEY_ID", "")
    aws_secret_access_key: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    aws_default_bucket_name: str = os.getenv("AWS_DEFAULT_BUCKET_NAME", "")
    
    # S3 client tuning
    s3_endpoint_url: str = os.getenv("S3_ENDPOINT_URL", "")
    s3_use_ssl: bool = os.getenv("S3_USE_SSL", "true").lower() == "true"
    s3_timeout_seconds: float = float(os.getenv("S3_TIMEOUT_SECONDS", "3"))
    
    # API Configuration
    api_title: str = os.getenv("API_TITLE", "S3 Object Gateway")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")
    
    @property
    def has_credentials(self) -> bool:
        """True when both AWS access credentials are configured."""
        return bool(self.aws_access_key_id and self.aws_secret_access_key)
    
    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
