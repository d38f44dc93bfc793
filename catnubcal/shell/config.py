"""Server configuration read from the environment."""

import os
from dataclasses import dataclass, field


DEFAULT_ALLOWED_ORIGINS = ("http://localhost:5173", "http://localhost:3000")


@dataclass
class ServerConfig:
    """Configuration for the HTTP/MCP server.

    Attributes:
        host: Interface to bind
        port: Port to listen on
        log_level: Root logging level name
        allowed_origins: Origins allowed by CORS
        default_timezone: IANA timezone used when a request names none
    """

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    default_timezone: str = "UTC"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build config from HOST, PORT, LOG_LEVEL, ALLOWED_ORIGINS, DEFAULT_TIMEZONE."""
        origins = os.environ.get("ALLOWED_ORIGINS")
        return cls(
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", 8080)),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            allowed_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else list(DEFAULT_ALLOWED_ORIGINS)
            ),
            default_timezone=os.environ.get("DEFAULT_TIMEZONE", "UTC"),
        )
