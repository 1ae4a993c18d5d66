"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = "Host Check"
    
    # Logging
    VERBOSE: bool = _env_bool("HOSTCHECK_VERBOSE")
    LOG_LEVEL: str = os.getenv("HOSTCHECK_LOG_LEVEL", "INFO").upper()
    
    # Command execution
    SHELL: str = os.getenv("HOSTCHECK_SHELL", "/bin/sh")
    
    # Recursive search guard
    DIR_SEARCH_MAX_FILES: int = int(os.getenv("HOSTCHECK_DIR_SEARCH_MAX_FILES", "10000"))
    
    # Empty key disables obfuscation
    OBFUSCATION_KEY: str = os.getenv("HOSTCHECK_OBFUSCATION_KEY", "")

settings = Settings()
