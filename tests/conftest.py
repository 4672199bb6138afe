"""Shared pytest fixtures for all tests."""

import base64
import io

import fakeredis
import mongomock
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from common.content_store import ContentStore
from common.database import Database
from common.job_queue import JobQueue
from server.container import ServiceContainer
from server.main import create_app
from server.session_store import SessionStore


@pytest.fixture
def redis_server():
    """In-memory Redis server shared by the session store and the job queue."""
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server):
    return fakeredis.FakeRedis(server=redis_server, decode_responses=True)


@pytest.fixture
def database():
    """In-memory MongoDB database."""
    return Database(mongomock.MongoClient(), "files_manager_test")


@pytest.fixture
def storage(tmp_path):
    """
    Content store rooted in a directory that does not exist yet.

    Args:
        tmp_path: pytest tmp_path fixture
    """
    return ContentStore(tmp_path / 'files_manager')


@pytest.fixture
def sessions(redis_client):
    return SessionStore(redis_client)


@pytest.fixture
def queue(redis_server):
    """Job queue on a bytes client, as rq requires."""
    return JobQueue(fakeredis.FakeRedis(server=redis_server))


@pytest.fixture
def container(database, sessions, queue, storage):
    return ServiceContainer(database=database, sessions=sessions, queue=queue, storage=storage)


@pytest.fixture
def client(container):
    """Create FastAPI test client serving from the in-memory stores."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


def make_basic_auth(email, password):
    credentials = base64.b64encode(f"{email}:{password}".encode('utf-8')).decode('ascii')
    return {'Authorization': f'Basic {credentials}'}


@pytest.fixture
def basic_auth():
    """Build an Authorization header from an email and password."""
    return make_basic_auth


@pytest.fixture
def register_and_login(client):
    """
    Register a user and return a function producing X-Token headers.
    """
    def _login(email='a@b.com', password='pw1'):
        client.post('/users', json={'email': email, 'password': password})
        response = client.get('/connect', headers=make_basic_auth(email, password))
        assert response.status_code == 200
        return {'X-Token': response.json()['token']}
    return _login


@pytest.fixture
def png_bytes():
    """A 800x600 PNG image."""
    image = Image.new('RGB', (800, 600), color=(200, 30, 30))
    output = io.BytesIO()
    image.save(output, format='PNG')
    return output.getvalue()
