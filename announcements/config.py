"""
announcements/config.py

Explicit connection settings for the Megaphone store.

Megaphone keeps announcements in its own MySQL schema. Rather than reading
loose globals, the project builds one StoreConfig (from the environment in
settings.py) and turns it into a Django DATABASES entry. This module must stay
importable from settings.py, so it only depends on the standard library.
"""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StoreConfig:
    """Recognized options: server, database, username, password (+ optional port)."""

    server: str = ""
    database: str = ""
    username: str = ""
    password: str = ""
    port: Optional[int] = None

    @classmethod
    def from_env(cls, environ=None, prefix: str = "MEGAPHONE_DB_") -> "StoreConfig":
        env = os.environ if environ is None else environ
        port = (env.get(f"{prefix}PORT") or "").strip()
        return cls(
            server=(env.get(f"{prefix}SERVER") or "").strip(),
            database=(env.get(f"{prefix}DATABASE") or "").strip(),
            username=(env.get(f"{prefix}USERNAME") or "").strip(),
            password=env.get(f"{prefix}PASSWORD") or "",
            port=int(port) if port else None,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.server and self.database)

    def as_database(self, conn_max_age: int = 0) -> dict:
        """Return a Django DATABASES entry (MySQL backend) for this store."""
        return {
            "ENGINE": "django.db.backends.mysql",
            "HOST": self.server,
            "PORT": str(self.port) if self.port else "",
            "NAME": self.database,
            "USER": self.username,
            "PASSWORD": self.password,
            # Connections are released at the end of every widget request.
            "CONN_MAX_AGE": conn_max_age,
            "OPTIONS": {"charset": "utf8mb4"},
        }

    def __repr__(self) -> str:
        # password omitted
        return (
            f"StoreConfig(server={self.server!r}, database={self.database!r}, "
            f"username={self.username!r}, port={self.port!r})"
        )
