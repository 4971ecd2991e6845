"""Configuration management using pydantic-settings"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    database_path: str = Field(default="./data/leases.db", description="Path to SQLite database")
    output_dir: str = Field(default="./data/contracts", description="Directory for exported PDFs and backups")
    log_level: str = Field(default="INFO", description="Logging level")

    # Language used for marital status words and CLI labels: 'pt' or 'en'
    contract_language: str = Field(default="pt", description="Active language")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Get application settings"""
    return Settings()
