import pytest


@pytest.fixture(autouse=True)
def _with_both_orderings(settings):
    pass
