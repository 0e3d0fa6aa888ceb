from pydantic_settings import BaseSettings

V2EX_API_DOMAIN = "https://www.v2ex.com/api/v2"


class Settings(BaseSettings):
    timeout: float = 30.0

    model_config = {
        "env_prefix": "V2EX_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
