import os, sys, pytest
# Ensure the backend directory is on path so 'nile_auth' and 'scripts' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from nile_auth import create_app


@pytest.fixture(scope='session', autouse=True)
def app_instance():
    app = create_app({'TESTING': True})
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture()
def v2_builder(app_instance):
    return app_instance.extensions['openapi']['v2']


@pytest.fixture()
def default_builder(app_instance):
    return app_instance.extensions['openapi']['default']


@pytest.fixture()
def ping_builder():
    from test_utils_openapi import make_builder, ping
    return make_builder([ping()])
