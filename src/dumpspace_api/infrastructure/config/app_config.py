"""Configuration management for the Dumpspace lookup tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .dumpspace_config import DEFAULT_CONFIG, get_config


@dataclass
class Config:
    """Configuration for the Dumpspace lookup tool."""

    base_url: str
    timeout: float
    documents_dir: Optional[Path] = None
    verbose: bool = False
    log_dir: Path = Path("logs")
    catalog_name: str = DEFAULT_CONFIG["CATALOG_NAME"]
    verify_tls: bool = True

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        service = get_config()

        documents_dir_str = os.getenv("DUMPSPACE_DOCUMENTS_DIR")
        log_dir_str = os.getenv("LOG_DIR", "logs")
        verbose_str = os.getenv("VERBOSE", "false").lower()

        return cls(
            base_url=str(service["BASE_URL"]).rstrip("/"),
            timeout=float(service["REQUEST_TIMEOUT"]),
            documents_dir=Path(documents_dir_str) if documents_dir_str else None,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str),
            catalog_name=str(service["CATALOG_NAME"]),
            verify_tls=bool(service["VERIFY_TLS"]),
        )

    @classmethod
    def from_args(
        cls,
        base_url: Optional[str] = None,
        documents_dir: Optional[Path] = None,
        timeout: Optional[float] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            base_url: Root URL of the document service (overrides env)
            documents_dir: Local mirror of the document tree (overrides env)
            timeout: Per-request timeout in seconds (overrides env)
            verbose: Enable verbose output (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if base_url is not None:
            config.base_url = base_url.rstrip("/")
        if documents_dir is not None:
            config.documents_dir = documents_dir
        if timeout is not None:
            config.timeout = timeout
        if verbose is not None:
            config.verbose = verbose

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.documents_dir is not None:
            if not self.documents_dir.exists():
                raise ValueError(f"Documents directory not found: {self.documents_dir}")
            if not self.documents_dir.is_dir():
                raise ValueError(f"Not a directory: {self.documents_dir}")
        elif not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must be http(s): {self.base_url}")

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
