from nile_auth.openapi_builder import DocumentMetadata, SpecBuilder
from nile_auth.openapi_parts.sources import EndpointDescriptor, StaticEndpointSource


def make_operation(op_id=None, **extra):
    op = {'summary': 'x', 'responses': {'200': {'description': 'OK'}}}
    if op_id:
        op['operationId'] = op_id
    op.update(extra)
    return op


def ping(path='/ping', method='get', op_id='ping', **extra):
    return EndpointDescriptor(path, method, make_operation(op_id, **extra))


def make_builder(descriptors, title='Test API', version='1.0', cache=True, components=None):
    return SpecBuilder(DocumentMetadata(title, version), StaticEndpointSource(descriptors), components, cache=cache)


class CountingSource:
    """Static source that records how often it was consulted."""

    def __init__(self, descriptors):
        self.descriptors = list(descriptors)
        self.calls = 0

    def endpoints(self):
        self.calls += 1
        return iter(self.descriptors)


class StaticBuilder:
    """Stands in for a SpecBuilder and hands out a fixed, unchecked document."""

    def __init__(self, document):
        self.document = document

    def build(self):
        return self.document
