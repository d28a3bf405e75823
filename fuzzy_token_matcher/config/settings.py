"""Application settings and configuration management."""

from functools import lru_cache
from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.tokenizer import TokenizerConfig


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Fuzzy Token Matcher")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Tokenization
    min_token_length: int = Field(default=2, ge=1)
    min_trigram_token_length: int = Field(default=4, ge=3)
    stop_words: List[str] = Field(default=["a", "an", "the", "in", "of", "to"])
    symbol_substitutions: Dict[str, str] = Field(default={"#": "sharp", "+": "plus"})
    
    # Search Configuration
    similarity_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    suggestion_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    max_results: int = Field(default=10, ge=1)
    max_fuzzy_candidates: int = Field(default=100, ge=1)
    title_weight: float = Field(default=0.7, ge=0.0, le=1.0)
    content_weight: float = Field(default=0.3, ge=0.0, le=1.0)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    model_config = SettingsConfigDict(
        env_prefix="FTM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def tokenizer_config(self) -> TokenizerConfig:
        """Build the immutable tokenizer configuration from these settings."""
        return TokenizerConfig(
            min_token_length=self.min_token_length,
            min_trigram_token_length=self.min_trigram_token_length,
            stop_words=frozenset(self.stop_words),
            symbol_substitutions=dict(self.symbol_substitutions),
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
