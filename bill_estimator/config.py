from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "BILL_ESTIMATOR_",
    }

    # App
    log_level: str = "INFO"

    # Bill name keywords by category. Order matters: the first category with a
    # matching keyword wins, so "Heating & Cooling" resolves to energy.
    category_keywords: dict[str, list[str]] = {
        "energy": ["electric", "gas", "heating"],
        "climate_control": ["cooling"],
        "telecom": ["verizon", "phone", "mobile"],
    }


settings = Settings()

