from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # API
    cors_origins: list[str] = ["*"]

    # Dashboard
    dashboard_port: int = 8050
    chart_step_months: int = 12

    # Default scenario shown when a session or form starts empty
    default_original_loan_size: float = 500000
    default_original_loan_term: float = 30
    default_rate: float = 0.065
    default_months_paid: float = 0
    default_down_payment: float = 100000
    default_new_rate: float = 0.05
    default_new_term: float = 30
    default_refi_cost_rate: float = 0.01


settings = Settings()
