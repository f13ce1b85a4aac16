import pytest

import fbscrypt
from fbscrypt import ScryptConfig

from vectors import FIREBASE_SALT_SEPARATOR, FIREBASE_SIGNER_KEY


@pytest.fixture
def firebase_config():
    return ScryptConfig.from_base64(FIREBASE_SIGNER_KEY, FIREBASE_SALT_SEPARATOR, rounds=8, mem_cost=14)


@pytest.fixture
def small_config():
    # cheap parameters so property-style tests stay fast
    return ScryptConfig.from_base64("c2lnbmVyLWtleQ==", "Bw==", rounds=1, mem_cost=4)


@pytest.fixture
def restore_default():
    saved = fbscrypt.get_default()
    yield
    fbscrypt.set_default(saved)
