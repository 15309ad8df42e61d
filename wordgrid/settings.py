import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    NTFY_TOPIC: str = "wordgrid"
    NTFY_URL: str = "https://ntfy.sh"
    NOTIFY_ENABLED: bool = False
    NOTIFY_WORDS_PER_GROUP: int = 10

    GRID_SIZE: int = 4
    MAX_GRID_SIZE: int = 50
    MAX_RESULTS: int = 50
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(type(getattr(self, fld)), env_val))


# Fields that may be changed at runtime through the settings API
EDITABLE_FIELDS: dict[str, type] = {
    "GRID_SIZE": int,
    "MAX_RESULTS": int,
    "NOTIFY_ENABLED": bool,
    "NOTIFY_WORDS_PER_GROUP": int,
    "NTFY_TOPIC": str,
    "DEBUG": bool,
}


def _coerce(kind: type, value):
    if issubclass(kind, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if issubclass(kind, Path):
        return Path(value)
    if issubclass(kind, int) and isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value}")
    return kind(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to cfg. Returns per-field errors; valid fields are still applied."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            setattr(cfg, name, _coerce(EDITABLE_FIELDS[name], value))
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value: {e}"
    return errors


settings = Settings()
