import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from None


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 5009
    log_level: str = "INFO"
    plot_dpi: int = 140
    index_html: Optional[str] = None

    @property
    def bind(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.environ.get("PROBCALC_HOST", cls.host),
            port=_env_int("PROBCALC_PORT", cls.port),
            log_level=os.environ.get("PROBCALC_LOG_LEVEL", cls.log_level).upper(),
            plot_dpi=_env_int("PROBCALC_PLOT_DPI", cls.plot_dpi),
            index_html=os.environ.get("PROBCALC_INDEX_HTML") or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
