"""Application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from janken.engine import HAND_IMAGE_URLS


DEFAULT_IMAGE_API_URL = "https://dog.ceo/api/breeds/image/random"


@dataclass(frozen=True)
class JankenConfig:
    """Configuration for the janken web page."""

    image_api_url: str = DEFAULT_IMAGE_API_URL
    fetch_timeout: Optional[float] = None  # None waits forever
    max_sessions: int = 1000
    seed: Optional[int] = None
    hand_image_urls: tuple[str, str, str] = HAND_IMAGE_URLS

    def __post_init__(self):
        if self.max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {self.max_sessions}")
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "JankenConfig":
        """Build config from JANKEN_* environment variables.

        Unset or empty variables keep their defaults.
        """
        env = os.environ if environ is None else environ

        kwargs: dict = {}
        if env.get("JANKEN_IMAGE_API_URL"):
            kwargs["image_api_url"] = env["JANKEN_IMAGE_API_URL"]
        if env.get("JANKEN_FETCH_TIMEOUT"):
            kwargs["fetch_timeout"] = float(env["JANKEN_FETCH_TIMEOUT"])
        if env.get("JANKEN_MAX_SESSIONS"):
            kwargs["max_sessions"] = int(env["JANKEN_MAX_SESSIONS"])
        if env.get("JANKEN_SEED"):
            kwargs["seed"] = int(env["JANKEN_SEED"])
        return cls(**kwargs)
