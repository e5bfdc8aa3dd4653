import pytest

from config import TestingConfig
from places_app import create_app
from places_app.errors import RemoteServiceError, UploadError
from places_app.media import UploadResult
from places_app.services import PlaceService
from places_app.store import PlaceStore

JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01fake-jpeg-body\xff\xd9"


class FakeMediaClient:
    """In-memory stand-in for the hosted media service."""

    def __init__(self):
        self.live = set()
        self.uploads = []
        self.deleted = []
        self.fail_upload = False
        self.fail_delete = False
        self._counter = 0

    def upload(self, data, mime_type):
        if self.fail_upload:
            raise UploadError("upload rejected")
        self._counter += 1
        public_id = f"places/img{self._counter}"
        self.live.add(public_id)
        self.uploads.append((public_id, data, mime_type))
        return UploadResult(url=f"https://res.example.com/{public_id}.jpg", public_id=public_id)

    def delete(self, public_id):
        self.deleted.append(public_id)
        if self.fail_delete:
            raise RemoteServiceError("service down")
        if public_id in self.live:
            self.live.remove(public_id)
            return True
        return False


@pytest.fixture
def media():
    return FakeMediaClient()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def store(db_path):
    return PlaceStore(db_path)


@pytest.fixture
def service(store, media):
    return PlaceService(store, media)


@pytest.fixture
def app(db_path, media):
    class _Config(TestingConfig):
        PLACES_DB_PATH = str(db_path)

    return create_app(_Config, media_client=media)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def csrf_app(db_path, media):
    class _Config(TestingConfig):
        PLACES_DB_PATH = str(db_path)
        WTF_CSRF_ENABLED = True

    return create_app(_Config, media_client=media)
