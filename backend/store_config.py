import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from errors import ConfigError


# Always read backend/.env, no matter where the tool is started from
ENV_PATH = Path(__file__).resolve().parent / ".env"

DB_NAME = "Hull_Schemes"
COLLECTION_NAME = "All_agri"


class StoreConfig(BaseModel):
    mongo_uri: str
    db_name: str = DB_NAME
    collection_name: str = COLLECTION_NAME


def load_env_file() -> bool:
    """Load ENV_PATH into os.environ if it exists. Existing variables win."""
    if not ENV_PATH.exists():
        return False
    return load_dotenv(dotenv_path=ENV_PATH)


def load_store_config(environ: Optional[Mapping[str, str]] = None) -> StoreConfig:
    if environ is None:
        load_env_file()
        environ = os.environ

    uri = (environ.get("MONGO_URI") or "").strip()
    if not uri:
        raise ConfigError(f"MONGO_URI not set. Please set it in .env (expected at: {ENV_PATH})")
    return StoreConfig(mongo_uri=uri)
