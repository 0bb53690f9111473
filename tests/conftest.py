import os
import pytest
from types import SimpleNamespace
from unittest.mock import patch

from fluent_collections import Collection
from fluent_collections.config import reset_config

CONFIG_ENV_VARS = [
    'FLUENT_COLLECTIONS_CONFIG',
    'FLUENT_COLLECTIONS_LOG_LEVEL',
    'FLUENT_COLLECTIONS_LOG_DESTINATION',
    'FLUENT_COLLECTIONS_LOG_FILE',
    'FLUENT_COLLECTIONS_JSON_INDENT',
]

@pytest.fixture(autouse=True)
def clean_config():
    """Run every test against default configuration."""
    env = {k: v for k, v in os.environ.items() if k not in CONFIG_ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        reset_config()
        yield
    reset_config()

@pytest.fixture
def items():
    return Collection(['some_item', 'some_other_item', 'some_third_item'])

@pytest.fixture
def person():
    return Collection({'name': 'john', 'age': 35, 'sex': 'male'})

@pytest.fixture
def people_records():
    return [
        {'name': 'john', 'age': 30},
        {'name': 'jane', 'age': 26},
        {'name': 'jacob', 'age': 44},
    ]

@pytest.fixture
def people_objects(people_records):
    return [SimpleNamespace(**record) for record in people_records]
