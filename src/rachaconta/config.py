import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import load_dotenv

from .dot import RANKDIRS

TRUTHY = {"1", "true", "yes", "sim", "on"}
FALSY = {"", "0", "false", "no", "nao", "não", "off"}


class ConfigError(ValueError):
    pass


@dataclass
class Settings:
    verbose: bool = False  # print the verification summary to stderr
    rankdir: str = "LR"  # Graphviz layout direction


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise ConfigError(f"{name}: valor booleano inválido: {raw}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment, after loading an optional ``.env``."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    rankdir = environ.get("RACHACONTA_RANKDIR", "LR").strip().upper()
    if rankdir not in RANKDIRS:
        raise ConfigError(f"RACHACONTA_RANKDIR deve ser um de {', '.join(RANKDIRS)}")

    return Settings(
        verbose=_parse_bool("RACHACONTA_VERBOSE", environ.get("RACHACONTA_VERBOSE", "")),
        rankdir=rankdir,
    )
