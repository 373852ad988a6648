from nile_auth.openapi_parts import registry
from nile_auth.openapi_parts.domains import mfa
from nile_auth.openapi_parts.sources import (
    CompositeEndpointSource,
    EndpointDescriptor,
    PrefixEndpointSource,
    StaticEndpointSource,
)
from test_utils_openapi import ping


def test_static_source_is_reiterable():
    src = StaticEndpointSource([ping('/a'), ping('/b')])
    assert [d.path for d in src.endpoints()] == ['/a', '/b']
    assert [d.path for d in src.endpoints()] == ['/a', '/b']
    assert len(src) == 2


def test_composite_keeps_order():
    src = CompositeEndpointSource(StaticEndpointSource([ping('/a')]), StaticEndpointSource([ping('/b'), ping('/c')]))
    assert [d.path for d in src.endpoints()] == ['/a', '/b', '/c']


def test_prefix_filter():
    src = PrefixEndpointSource(StaticEndpointSource([ping('/v2/a'), ping('/a'), ping('/v2/b')]), '/v2/')
    assert [d.path for d in src.endpoints()] == ['/v2/a', '/v2/b']


def test_prefix_filter_passes_malformed_items_through():
    bad = ('/a', 'get', {})
    src = PrefixEndpointSource(StaticEndpointSource([bad]), '/v2/')
    assert list(src.endpoints()) == [bad]


def test_registry_sources():
    default_paths = {d.path for d in registry.default_source().endpoints()}
    v2_paths = {d.path for d in registry.v2_source().endpoints()}
    assert v2_paths and all(p.startswith('/v2/') for p in v2_paths)
    assert default_paths - v2_paths == {'/databases/{database}/tenants/{tenantId}/users'}


def test_mfa_routes_documented():
    methods = {d.method for d in mfa.build_endpoints() if d.path == mfa.MFA_PATH}
    assert methods == {'put', 'delete', 'post'}


def test_domain_descriptors_are_independent():
    # every call hands out fresh operation dicts
    first = mfa.build_endpoints()[0]
    first.operation['parameters'].append({'name': 'junk'})
    assert mfa.build_endpoints()[0].operation['parameters'] == [{'$ref': '#/components/parameters/database'}]


def test_descriptors_are_descriptor_instances():
    assert all(isinstance(d, EndpointDescriptor) for d in registry.default_source().endpoints())
