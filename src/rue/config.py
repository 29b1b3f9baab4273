"""Application configuration.

AppConfig is a frozen dataclass, immutable after creation.
"""

from dataclasses import dataclass

from rue.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 0  # 0 = auto-detect from CPU count

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch (e.g. ".toml")
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    # Logging (handlers are installed by pounce, not by rue)
    log_level: str = "info"

    # Limits: bodies above this size are not read; form values from them are ignored
    max_content_length: int = 10 * 1024 * 1024  # 10 MB


    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)
        if self.max_content_length < 0:
            msg = "max_content_length must not be negative"
            raise ConfigurationError(msg)
