import os
import uuid
import pytest

# Keep test runs from writing log files
os.environ.setdefault("LOG_PATH", "")
os.environ.setdefault("APP_ENV", "testing")

from fastapi.testclient import TestClient
from message_api.fastapi_app import create_fastapi_app
from message_api.domain.value_objects.organization_id import OrganizationId
from message_api.infrastructure.persistence import InMemoryMessageRepository


@pytest.fixture()
def app():
    """Create a new FastAPI app (with its own DI container and store) for each test."""
    return create_fastapi_app()


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def org_id():
    return OrganizationId(str(uuid.uuid4()))


@pytest.fixture()
def other_org_id():
    return OrganizationId(str(uuid.uuid4()))


@pytest.fixture()
def repository():
    return InMemoryMessageRepository()


@pytest.fixture()
def messages_url():
    """Build the collection URL for an organization."""

    def _url(organization_id, message_id=None):
        base = f"/api/v1/organizations/{organization_id}/messages"
        return f"{base}/{message_id}" if message_id else base

    return _url
