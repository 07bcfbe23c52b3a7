from __future__ import annotations

from typing import Optional

from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.settings import ModelSettings

from ..config import ModelConfig, load_model_config


def build_model(config: Optional[ModelConfig] = None) -> GoogleModel:
    config = config or load_model_config()
    if not config.api_key:
        raise RuntimeError("GOOGLE_API_KEY is required for LLM calls.")
    provider = GoogleProvider(api_key=config.api_key)
    return GoogleModel(config.model_name, provider=provider)


def build_model_settings(config: Optional[ModelConfig] = None) -> ModelSettings:
    config = config or load_model_config()
    return ModelSettings(
        temperature=config.temperature,
        max_tokens=config.max_output_tokens,
    )
