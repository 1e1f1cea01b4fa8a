import falcon
import falcon.testing
import pytest

from falcon_pagination.middleware import PaginationMiddleware


class RecordingResource:
    """Remembers the request context it was called with."""

    def __init__(self):
        self.calls = []

    def on_get(self, req, res):
        self.calls.append(dict(vars(req.context)))
        res.media = {"ok": True}


@pytest.fixture
def resource():
    return RecordingResource()


@pytest.fixture
def make_client(resource):
    def _make_client(*custom_options, **kwargs):
        app = falcon.App(middleware=[PaginationMiddleware(*custom_options, **kwargs)])
        app.add_route("/", resource)
        return falcon.testing.TestClient(app)

    return _make_client
