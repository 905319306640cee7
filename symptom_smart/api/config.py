"""
Symptom Smart: API Configuration

FastAPI server settings and path to the system configuration.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """API server configuration"""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = True

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # YAML with SymptomSmartConfig; defaults if None
    config_path: Optional[str] = None

    # Sessions
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_title: str = "Symptom Smart API"
    api_description: str = "Symptom intake with spell-checked symptom tags"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Build configuration from environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            config_path=os.getenv("SYMPTOM_CONFIG_PATH"),
            max_sessions=int(os.getenv("MAX_SESSIONS", "1000")),
            session_timeout_minutes=int(os.getenv("SESSION_TIMEOUT_MINUTES", "60")),
        )


# Global configuration
config = APIConfig.from_env()
