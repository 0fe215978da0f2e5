import httpx
import pytest
import respx

from createsend.connectors.api import Createsend

BASE_URL = "https://api.test/api/v3.1/"
API_KEY = "test-api-key"


@pytest.fixture
def mock_api():
    with respx.mock(assert_all_called=True) as router:
        yield router


@pytest.fixture
def cs(mock_api):
    api = Createsend(api_key=API_KEY, base_url=BASE_URL)
    yield api
    api.close()


class BrokenStream(httpx.SyncByteStream):
    """Body stream that fails after yielding ``prefix``, like a dropped connection."""

    def __init__(self, prefix: bytes = b""):
        self.prefix = prefix

    def __iter__(self):
        if self.prefix:
            yield self.prefix
        raise httpx.RemoteProtocolError("peer closed connection without sending complete message body")


def mock_transport_api(handler) -> Createsend:
    """Facade over an injected client whose transport is ``handler``."""
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return Createsend(api_key=API_KEY, base_url=BASE_URL, http_client=http_client)
