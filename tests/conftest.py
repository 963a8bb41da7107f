import pytest

from colltools.structs.configuration import LoggingSettings, OrderingSettings, Settings, \
                                            configured


def pytest_configure(config):
    # Unexpected warnings should fail the tests. Use `-Wignore` to explicitly disable it.
    config.addinivalue_line('filterwarnings', 'error')


@pytest.fixture(params=[
    pytest.param(True, id='shuffled'),
    pytest.param(False, id='native'),
])
def settings(request):
    """
    Run the test with both the shuffled & native iteration orders of mappings.

    No tests should depend on the order anyway, so the results must be the same.
    """
    settings = Settings(
        ordering=OrderingSettings(shuffle=request.param),
        logging=LoggingSettings(),
    )
    with configured(settings):
        yield settings


@pytest.fixture()
def mutable_settings():
    settings = Settings()
    with configured(settings):
        yield settings
