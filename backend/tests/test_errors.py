import logging

from nile_auth import create_app
from test_utils_openapi import StaticBuilder


def test_unknown_path_returns_error_json(client):
    resp = client.get('/non-existent-path')
    # Flask default 404 should be wrapped by error handler
    assert resp.status_code == 404
    body = resp.get_json()
    assert 'error' in body
    assert body['error']['status'] == 404
    assert 'detail' in body['error']


def test_wrong_method_returns_error_json(client):
    resp = client.post('/v2/openapi')
    assert resp.status_code == 405
    assert resp.get_json()['error']['status'] == 405


def test_generation_failure_is_generic_500():
    app = create_app({'TESTING': True, 'OPENAPI_V2_TITLE': ''})
    resp = app.test_client().get('/v2/openapi')
    assert resp.status_code == 500
    body = resp.get_json()
    assert body == {'error': {'status': 500, 'title': 'Internal Server Error', 'detail': 'Unexpected error'}}
    assert 'Content-Disposition' not in resp.headers
    # the other variant is unaffected
    assert app.test_client().get('/swagger/spec').status_code == 200


def test_serialization_failure_is_generic_500():
    app = create_app({'TESTING': True})
    app.extensions['openapi']['default'] = StaticBuilder({'openapi': '3.0.0', 'x-object': object()})
    resp = app.test_client().get('/swagger/spec')
    assert resp.status_code == 500
    body = resp.get_json()
    assert body['error']['title'] == 'Internal Server Error'
    assert 'x-object' not in resp.get_data(as_text=True)


def test_generation_failure_logged_once(caplog):
    app = create_app({'TESTING': True, 'OPENAPI_V2_TITLE': ''})
    with caplog.at_level(logging.ERROR, logger=app.logger.name):
        assert app.test_client().get('/v2/swagger/spec').status_code == 500
    records = [r for r in caplog.records if r.name == app.logger.name]
    assert len(records) == 1
    assert 'document title is required' in records[0].getMessage()
    assert records[0].exc_info is not None
