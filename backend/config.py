from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.1
    gemini_max_output_tokens: int = 4096
    oracle_timeout_seconds: float = 60.0  # 0 disables the deadline

    # JSON file overriding any subset of the seed skill taxonomy
    taxonomy_path: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
