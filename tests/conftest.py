import pytest

import tagsmith


@pytest.fixture(autouse=True)
def restore_default_config():
    saved = tagsmith.get_config()
    yield
    tagsmith.set_profile(saved.profile)
    tagsmith.set_charset(saved.charset)
