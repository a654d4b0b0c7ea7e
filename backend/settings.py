from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_ASSET_ROOT = os.path.join(BASE_DIR, "dist")
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5173

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    asset_root: str = DEFAULT_ASSET_ROOT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``ASSET_ROOT``, ``HOST``, ``PORT`` and ``FLASK_DEBUG``.

        ``PORT`` wins over the default whenever it is set.
        """
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"invalid PORT: {raw_port!r}") from None
        return cls(
            asset_root=os.path.abspath(env.get("ASSET_ROOT") or DEFAULT_ASSET_ROOT),
            host=env.get("HOST", DEFAULT_HOST),
            port=port,
            debug=env.get("FLASK_DEBUG", "").strip().lower() in _TRUTHY,
        )
