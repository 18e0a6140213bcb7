import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DB_PATH = "data/ideamatch.db"


def load_env() -> None:
    """Load .env from the working directory if present.
    Variables already set in the environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def db_path_from_env() -> Path:
    return Path(os.getenv("IDEAMATCH_DB", DEFAULT_DB_PATH))
