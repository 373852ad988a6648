from nile_auth import create_app
from nile_auth.config.openapi import env_flag, metadata_kwargs, openapi_config_from_env


def test_defaults(app_instance):
    assert app_instance.config['OPENAPI_TITLE'] == 'Nile auth API'
    assert app_instance.config['OPENAPI_VERSION'] == '0.1'
    assert app_instance.config['OPENAPI_CACHE'] is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv('OPENAPI_TITLE', 'Staging auth API')
    monkeypatch.setenv('OPENAPI_V2_VERSION', '2.1')
    monkeypatch.setenv('OPENAPI_CACHE', 'off')
    app = create_app({'TESTING': True})
    builders = app.extensions['openapi']
    assert builders['default'].build()['info']['title'] == 'Staging auth API'
    assert builders['v2'].build()['info']['version'] == '2.1'
    assert builders['default'].cache is False


def test_explicit_config_wins(monkeypatch):
    monkeypatch.setenv('OPENAPI_V2_TITLE', 'from env')
    app = create_app({'TESTING': True, 'OPENAPI_V2_TITLE': 'from config', 'OPENAPI_V2_DESCRIPTION': 'v2 only'})
    info = app.extensions['openapi']['v2'].build()['info']
    assert info == {'title': 'from config', 'version': '0.1', 'description': 'v2 only'}


def test_variants_configured_independently():
    app = create_app({'TESTING': True, 'OPENAPI_TITLE': 'Full', 'OPENAPI_V2_TITLE': 'Narrow'})
    builders = app.extensions['openapi']
    assert builders['default'] is not builders['v2']
    assert builders['default'].build()['info']['title'] == 'Full'
    assert builders['v2'].build()['info']['title'] == 'Narrow'


def test_env_flag(monkeypatch):
    monkeypatch.delenv('SOME_FLAG', raising=False)
    assert env_flag('SOME_FLAG', True) is True
    for raw, expected in (('1', True), ('Yes', True), ('0', False), ('false', False), ('', False)):
        monkeypatch.setenv('SOME_FLAG', raw)
        assert env_flag('SOME_FLAG', True) is expected


def test_metadata_kwargs():
    config = openapi_config_from_env()
    config['OPENAPI_V2_VERSION'] = '9'
    assert metadata_kwargs(config, 'V2')['version'] == '9'
    assert metadata_kwargs(config)['version'] == config['OPENAPI_VERSION']
