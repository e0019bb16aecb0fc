"""
Application configuration read from the environment.

Values are looked up at call time so a `.env` loaded by `app.py` (or a test
that patches the environment) is always honoured.
"""
import os
import sys
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv


CREDENTIALS_ENV_VAR = 'GOOGLE_APPLICATION_CREDENTIALS'

SHEETS_SCOPES = ['https://www.googleapis.com/auth/spreadsheets']
DEFAULT_TOKEN_URI = 'https://oauth2.googleapis.com/token'

# Fixed append target: first data row under the header, user-entered values, new rows inserted
APPEND_RANGE = 'A2'
VALUE_INPUT_OPTION = 'USER_ENTERED'
INSERT_DATA_OPTION = 'INSERT_ROWS'

DEFAULT_SPREADSHEET_IDS = {
    'buy': '1GbuGCJMBioG3ZMRh-FkaGXMlfQXy18XZgCnp5M_P-D4',
    'sell': '10VFNaWb3vDf-K4YKenMaVZBA20pzsEH8Hbrkag8E39M',
    'rent': '1q88ckhUiTXdF_j41SLVWibru3KreVWuroo_MOUuxQ10',
}

DEV_CORS_ORIGINS = 'http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173'


def load_environment() -> List[Path]:
    """Load `.env` from the backend directory and the repo root, if present."""
    backend_dir = Path(__file__).parent.parent
    loaded = []
    for env_path in (backend_dir / '.env', backend_dir.parent / '.env'):
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
            loaded.append(env_path)

    if not loaded:
        # In production, environment variables are set directly
        load_dotenv()
    return loaded


def is_development() -> bool:
    return '--dev' in sys.argv or os.getenv('FLASK_ENV') == 'development'


def get_spreadsheet_ids() -> Dict[str, str]:
    """Map each user type to its spreadsheet id, allowing per-type env overrides."""
    return {
        user_type: os.getenv(f'{user_type.upper()}_SPREADSHEET_ID') or default_id
        for user_type, default_id in DEFAULT_SPREADSHEET_IDS.items()
    }


def get_cors_origins() -> List[str]:
    """
    Allowed CORS origins from CORS_ORIGINS.

    Raises:
        ValueError: if unset outside development.
    """
    cors_origins = os.getenv('CORS_ORIGINS', '')
    if not cors_origins:
        if is_development():
            cors_origins = DEV_CORS_ORIGINS
        else:
            raise ValueError("CORS_ORIGINS environment variable must be set in production")
    return [origin.strip() for origin in cors_origins.split(',') if origin.strip()]
