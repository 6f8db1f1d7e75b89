import os
from dataclasses import dataclass
from pathlib import Path


def _load_dotenv_if_available() -> None:
    """Best-effort .env loading without hard dependency."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    # Prefer the .env next to this package, then fall back to cwd resolution
    try:
        env_path = Path(__file__).resolve().parent / ".env"
        load_dotenv(dotenv_path=env_path, override=False)
    except Exception:
        pass
    load_dotenv(override=False)


@dataclass(frozen=True)
class Config:
    # Firebase / Google Cloud Storage
    bucket_name: str
    storage_prefix: str = ""
    credentials_path: str | None = None
    project_id: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_file_path: str | None = None

    def validate(self) -> None:
        if not self.bucket_name:
            raise ValueError("FIREBASE_STORAGE_BUCKET is required")

        if self.storage_prefix.startswith("/"):
            raise ValueError("FIREBASE_STORAGE_PREFIX must not start with '/'")

        if self.credentials_path and not Path(self.credentials_path).is_file():
            raise ValueError(
                f"GOOGLE_APPLICATION_CREDENTIALS does not exist: {self.credentials_path}"
            )

        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR, or CRITICAL")

        if self.log_format not in {"json", "text"}:
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")

    def create_storage_adapter(self):
        """
        Create the Firebase storage adapter described by this configuration.

        Returns:
            FirebaseStorageAdapter bound to the configured bucket and prefix
        """
        from firebase_storage.storage import FirebaseStorageAdapter

        return FirebaseStorageAdapter.from_bucket(
            self.bucket_name,
            prefix=self.storage_prefix,
            credentials_path=self.credentials_path,
            project_id=self.project_id,
        )


def load_config() -> Config:
    _load_dotenv_if_available()

    config = Config(
        bucket_name=os.environ.get("FIREBASE_STORAGE_BUCKET", "").strip(),
        storage_prefix=os.environ.get("FIREBASE_STORAGE_PREFIX", ""),
        credentials_path=os.environ.get("GOOGLE_APPLICATION_CREDENTIALS") or None,
        project_id=os.environ.get("GCP_PROJECT_ID") or None,
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_format=os.environ.get("LOG_FORMAT", "json"),
        log_file_path=os.environ.get("LOG_FILE_PATH") or None,
    )

    config.validate()
    return config
