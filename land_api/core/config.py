from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from the repository root, falling back to the working directory
env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

DEFAULT_ABI_PATH = Path(__file__).resolve().parent.parent / "abi" / "LandManagement.json"


class Settings(BaseSettings):
    PROJECT_NAME: str = "Land Management API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    RPC_URL: str = "http://localhost:8545"
    CONTRACT_ADDRESS: Optional[str] = None
    CONTRACT_ABI_PATH: str = str(DEFAULT_ABI_PATH)
    PRIVATE_KEY: Optional[str] = None

    # Try to build the contract handle at startup; requests re-initialize on demand anyway
    EAGER_INIT: bool = True
    # 400 for bad input, 502 for contract/RPC failures instead of 500 for everything
    SEPARATE_CLIENT_ERRORS: bool = False

    CORS_ORIGINS: list[str] = ["*"]
    DOCS_OUTPUT_DIR: str = "docs"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()
