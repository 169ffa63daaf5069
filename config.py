""" CONFIG

Defaults can be overridden through environment variables.
"""
from dataclasses import dataclass
from os import environ

from geometry import EXCLUSION_MODES, EXCLUDE_BY_POINT

#
# DEFAULTS
#
DEFAULT_EXCLUSION = EXCLUDE_BY_POINT
DEFAULT_LOG_LEVEL = 'INFO'
LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')
EXCLUSION_ENV = 'QUICKHULL_EXCLUSION'
LOG_LEVEL_ENV = 'QUICKHULL_LOG_LEVEL'


#
# ENV
#
def get(var_name, default=None):
    return _strtoval(environ.get(var_name, default))


def _strtoval(string):
    if string:
        string = string.strip()
        if string.lower() == 'none':
            return None
    return string or None


@dataclass(frozen=True)
class HullConfig:
    exclusion: str = DEFAULT_EXCLUSION

    def __post_init__(self):
        if self.exclusion not in EXCLUSION_MODES:
            raise ValueError(
                f'Unknown exclusion mode {self.exclusion!r}, expected one of {EXCLUSION_MODES}'
            )

    @classmethod
    def from_env(cls) -> "HullConfig":
        exclusion = get(EXCLUSION_ENV) or DEFAULT_EXCLUSION
        return cls(exclusion=exclusion.lower())


def log_level() -> str:
    level = (get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level
