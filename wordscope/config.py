from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///wordscope.db"

    anthropic_api_key: str = ""
    openai_api_key: str = ""
    llm_provider: str = "anthropic"  # "anthropic" or "openai"
    llm_model: str = "claude-sonnet-4-20250514"
    llm_max_tokens: int = 2048

    unsplash_access_key: str = ""
    unsplash_search_url: str = "https://api.unsplash.com/search/photos"
    image_timeout_seconds: float = 10.0
    # Neutral background shown when no photo matches the word
    default_image_url: str = (
        "https://images.unsplash.com/photo-1528459801416-a9e53bbf4e17"
        "?q=80&w=1912&auto=format&fit=crop"
    )

    default_language: str = "Turkish"
    history_limit: int = 20

    model_config = {"env_prefix": "WORDSCOPE_", "env_file": ".env"}


settings = Settings()
