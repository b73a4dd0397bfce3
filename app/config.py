import os
from dotenv import load_dotenv

load_dotenv(verbose=True)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes")


PSQL_URL: str = os.getenv("PSQL_URL", "sqlite:///cities.db")
SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO", "false"))

PORT: int = int(os.getenv("PORT", "5001"))
DEBUG: bool = _as_bool(os.getenv("DEBUG", "false"))
CLIENT_ORIGIN: str = os.getenv("CLIENT_ORIGIN", "*")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
