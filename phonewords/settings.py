import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from phonewords.solver import STRATEGIES


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    DEFAULT_STRATEGY: str = "walk"
    MAX_DIGITS: int = 16
    # Cap on letter strings per request; the split strategy visits every one
    MAX_LETTER_STRINGS: int = 100_000
    CANONICAL_COMPARE: bool = True

    BENCHMARK_RUNS: int = 500
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "english-words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, float):
                    setattr(self, fld, float(env_val))
                elif isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, env_val)


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "DEFAULT_STRATEGY": str,
    "MAX_DIGITS": int,
    "MAX_LETTER_STRINGS": int,
    "CANONICAL_COMPARE": bool,
    "BENCHMARK_RUNS": int,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def _coerce(value, typ: type):
    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("1", "true", "yes", "0", "false", "no"):
            return value.lower() in ("1", "true", "yes")
        raise ValueError(f"expected a boolean, got {value!r}")
    if typ is int:
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    if typ is float:
        return float(value)
    return str(value)


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply the valid updates; return {field: reason} for the rejected ones."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "unknown field" if not hasattr(cfg, name) else "field is not editable"
            continue
        try:
            coerced = _coerce(value, EDITABLE_FIELDS[name])
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
            continue
        if name == "DEFAULT_STRATEGY" and coerced not in STRATEGIES:
            errors[name] = f"unknown strategy {coerced!r}"
            continue
        if name in ("MAX_DIGITS", "MAX_LETTER_STRINGS", "BENCHMARK_RUNS") and coerced < 1:
            errors[name] = "must be at least 1"
            continue
        setattr(cfg, name, coerced)
    return errors


def configure_logging(cfg: Settings):
    """Emit per-search DEBUG lines from the "phonewords" logger when DEBUG is on."""
    logging.getLogger("phonewords").setLevel(logging.DEBUG if cfg.DEBUG else logging.INFO)


settings = Settings()
