import os
import sys
import uuid

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from fastapi.testclient import TestClient

from orgmessages.domain.value_objects.organization_id import OrganizationId
from orgmessages.fastapi_app import create_fastapi_app
from orgmessages.infrastructure.persistence import InMemoryMessageRepository
from orgmessages.setup.ioc import create_container


@pytest.fixture()
def organization_id():
    return OrganizationId(str(uuid.uuid4()))


@pytest.fixture()
def repository():
    return InMemoryMessageRepository()


@pytest.fixture()
def app():
    """Create a FastAPI app with a fresh in-memory store for each test."""
    return create_fastapi_app(create_container("memory"))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
