import json
import os
from collections.abc import Mapping
from typing import Dict, Optional

from snakemake.utils import validate as snakemake_validate

from .util import ENV_VAR_PREFIX, cast, logger

CONFIG_SCHEMA = os.path.join(os.path.dirname(__file__), 'schemas', 'config.json')

ENV_OVERRIDES = {'classify.min_sv_size': (ENV_VAR_PREFIX + 'MIN_SV_SIZE', int)}
"""config keys which may be overridden by an environment variable, and the type to cast to"""


class ImmutableDict(Mapping):
    def __init__(self, data):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)


def validate_config(config: Dict) -> None:
    """
    Check that the config conforms to the expected schema. Missing values are filled with
    their defaults (in place)

    Raises:
        AssertionError: the config does not conform to the schema
    """
    try:
        snakemake_validate(config, CONFIG_SCHEMA, set_default=True)
    except Exception as err:
        short_msg = '. '.join(
            [line for line in str(err).split('\n') if line.strip()][:3]
        )  # these can get super long
        raise AssertionError(short_msg) from err


def load_config(filename: Optional[str] = None) -> Dict:
    """
    read a JSON config file (if given), apply any environment overrides and fill defaults

    Args:
        filename: path to the JSON config file

    Returns:
        the validated config
    """
    config: Dict = {}
    if filename:
        logger.info(f'reading config: {filename}')
        with open(filename, 'r') as fh:
            config = json.load(fh)

    for key, (env_name, cast_type) in ENV_OVERRIDES.items():
        if os.environ.get(env_name, '').strip():
            config[key] = cast(os.environ[env_name].strip(), cast_type)
            logger.info(f'{key} = {config[key]} (from {env_name})')

    validate_config(config)
    return config


DEFAULTS: Dict = {}
validate_config(DEFAULTS)
DEFAULTS = ImmutableDict(DEFAULTS)
