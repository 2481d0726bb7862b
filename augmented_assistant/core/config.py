from pydantic_settings import BaseSettings, SettingsConfigDict

class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    openai_api_key: str
    answer_llm: str = "gpt-4o-mini"
    temperature: float = 0
    log_level: str = "INFO"

config = Config()
