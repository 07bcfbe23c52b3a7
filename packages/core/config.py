from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


DEFAULT_MODEL_NAME = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_OUTPUT_TOKENS = 2048


@dataclass(frozen=True)
class ModelConfig:
    model_name: str
    temperature: float
    max_output_tokens: int
    api_key: Optional[str]


def load_env_file(path: Optional[str] = None) -> bool:
    """Load ``.env`` from the working directory; real environment values win."""
    return load_dotenv(path or os.path.join(os.getcwd(), ".env"), override=False)


def load_model_config() -> ModelConfig:
    return ModelConfig(
        model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME),
        temperature=float(os.getenv("GEMINI_TEMPERATURE", str(DEFAULT_TEMPERATURE))),
        max_output_tokens=int(
            os.getenv("GEMINI_MAX_OUTPUT_TOKENS", str(DEFAULT_MAX_OUTPUT_TOKENS))
        ),
        api_key=os.getenv("GOOGLE_API_KEY"),
    )


def optional_float_env(key: str) -> Optional[float]:
    """Read a float from the environment; unset or blank means ``None``."""
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{key} must be a number, got {raw!r}") from exc
