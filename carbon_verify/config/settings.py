from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    extraction_provider: str = "openai"
    extraction_api_key: str = ""
    extraction_model_name: str = "gpt-4o-mini"
    extraction_timeout_seconds: int = 60
    extraction_temperature: float = 0.0
    extraction_base_url: str = ""
    extraction_input_mode: str = "file"

    pdf_engine: str = "pdfplumber"

    stage_delay_analyzing_seconds: float = 0.8
    stage_delay_extracting_seconds: float = 1.0
    stage_delay_generating_seconds: float = 0.6
    stage_delay_finalizing_seconds: float = 0.0

    ledger_commit_delay_seconds: float = 2.0
    ledger_base_block_height: int = 298_745_123
    ledger_block_height_jitter: int = 1000
    ledger_fee: float = 0.000005
    ledger_network: str = "Solana Devnet"
    ledger_explorer_url_template: str = (
        "https://explorer.solana.com/tx/{signature}?cluster=devnet"
    )

    reports_dir: str = "reports"
    automation_auth_state_path: str = "auth.json"
    automation_target_url_template: str = (
        "https://earth-credits-hub-32-cn42.vercel.app/project/{project_id}"
    )
    automation_login_url: str = "https://earth-credits-hub-32-cn42.vercel.app/login"
    automation_dashboard_url_glob: str = "**/verifier-dashboard"
    automation_headless: bool = False
    automation_slow_mo_ms: int = 400
    automation_final_pause_ms: int = 5000

    api_host: str = "0.0.0.0"
    api_port: int = 3001
    api_cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
    ]
