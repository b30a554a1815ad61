from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = os.getenv("FOODIE_API_URL", "http://localhost:5000/api")
    timeout: float = float(os.getenv("FOODIE_API_TIMEOUT", "10.0"))
    search_debounce: float = float(os.getenv("FOODIE_SEARCH_DEBOUNCE", "0.3"))
    token_file: Path = Path(os.getenv("FOODIE_TOKEN_FILE", str(Path.home() / ".foodie" / "session.json")))


DEFAULT_CLIENT_CONFIG = ClientConfig()
