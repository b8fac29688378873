"""
Pytest configuration and shared fixtures for corro tests.
"""

import pytest
from faker import Faker

from corro import Validator, config
from corro.core import localization

fake = Faker()


@pytest.fixture
def validator():
    """Validator with only the built-in rules."""
    return Validator()


@pytest.fixture
def sample_user():
    """Provide a payload that satisfies `user_schema`."""
    return {
        "name": fake.name(),
        "email": fake.email(),
        "company": fake.company(),
        "tags": [fake.word() for _ in range(3)],
        "address": {"city": fake.city(), "postcode": fake.postcode()},
    }


@pytest.fixture
def user_schema():
    return {
        "name": {"required": True, "notEmpty": True, "minLength": 2},
        "email": {"required": True, "format": "email"},
        "company": {"type": "string"},
        "tags": {"type": "array", "values": {"required": True, "type": "string"}},
        "address": {
            "required": True,
            "city": {"required": True},
            "postcode": {"required": True, "notEmpty": True},
        },
    }


@pytest.fixture
def corro_env():
    """Monkeypatch CORRO_* variables; settings are re-read once they are restored."""
    with pytest.MonkeyPatch.context() as mp:
        yield mp
    config.reload()


@pytest.fixture
def locales(tmp_path):
    """Temporary locale directory; locale state is reset afterwards."""
    lang_dir = tmp_path / "lang"
    lang_dir.mkdir()
    localization.set_locale_path(str(lang_dir))
    yield lang_dir
    localization.set_locale(config.LOCALE_DEFAULT)
    localization.set_locale_path(None)
