import pytest

from fieldengine.transform.pipeline import clear_rule_cache


@pytest.fixture(autouse=True)
def _fresh_rule_cache():
    clear_rule_cache()
    yield
    clear_rule_cache()
