import pytest

import fbscrypt
from fbscrypt import ConfigError

from vectors import FIREBASE_HASH, FIREBASE_PASSWORD, FIREBASE_SALT


def test_default_starts_empty():
    assert fbscrypt.DEFAULT == fbscrypt.ScryptConfig()
    assert not fbscrypt.DEFAULT.is_valid


def test_default_fails_config_check(restore_default):
    fbscrypt.set_default(fbscrypt.DEFAULT)
    with pytest.raises(ConfigError):
        fbscrypt.encode("pw", "c2FsdA==")
    assert fbscrypt.verify("pw", "anything", "c2FsdA==") is False


def test_set_default(restore_default, firebase_config):
    fbscrypt.set_default(firebase_config)
    assert fbscrypt.get_default() is firebase_config
    assert fbscrypt.encode(FIREBASE_PASSWORD, FIREBASE_SALT) == FIREBASE_HASH
    assert fbscrypt.verify(FIREBASE_PASSWORD, FIREBASE_HASH, FIREBASE_SALT)


def test_explicit_config_wins_over_default(small_config):
    h = fbscrypt.encode("pw", "c2FsdA==", config=small_config)
    assert fbscrypt.verify("pw", h, "c2FsdA==", config=small_config)


def test_default_constant_keeps_initial_value(restore_default, small_config):
    fbscrypt.set_default(small_config)
    assert fbscrypt.get_default() is small_config
    assert not fbscrypt.DEFAULT.is_valid
