"""Settings loaded from environment variables, with an optional .env file.

Priority: real env var > .env entry (working directory) > default.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

ENV_PREFIX = "TASKLINE"
DEFAULT_DATA_FILE = Path("data") / "tasks.txt"
DEFAULT_LOG_DIR = Path(".local") / "taskline"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def read_dotenv(path: Path) -> Dict[str, str]:
    """Parse KEY=VALUE lines; blank lines, comments and malformed lines are skipped."""
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return values  # unreadable .env is ignored, defaults apply
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if k.startswith(ENV_PREFIX + "_"):
            values[k] = v
    return values


def _truthy(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_dir: Path
    log_level: str
    log_to_file: bool

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None,
                 dotenv_path: Optional[Path] = None) -> "Settings":
        env = os.environ if environ is None else environ
        overrides = read_dotenv(dotenv_path if dotenv_path is not None else Path.cwd() / '.env')

        def get(suffix: str) -> Optional[str]:
            raw = env.get(_k(suffix))
            if raw is None or raw.strip() == "":
                raw = overrides.get(_k(suffix))
            return raw

        data_file = get("DATA_FILE")
        log_dir = get("LOG_DIR")
        return Settings(
            data_file=Path(data_file).expanduser() if data_file else DEFAULT_DATA_FILE,
            log_dir=Path(log_dir).expanduser() if log_dir else DEFAULT_LOG_DIR,
            log_level=(get("LOG_LEVEL") or "WARNING").upper(),
            log_to_file=_truthy(get("LOG_FILE"), True),
        )

    def with_overrides(self, data_file: Optional[Path] = None,
                       log_level: Optional[str] = None) -> "Settings":
        return Settings(
            data_file=data_file if data_file is not None else self.data_file,
            log_dir=self.log_dir,
            log_level=log_level.upper() if log_level else self.log_level,
            log_to_file=self.log_to_file,
        )
