# tests/conftest.py
"""
Pytest configuration and shared fixtures for all tests
"""

import pytest
import os
import sys
from unittest.mock import MagicMock

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from services.helpers.error_handlers import PersistenceError, UpstreamError
from services.routing import MessageRouter


class TestConfig(Config):
    """Configuration that never reaches real services"""
    __test__ = False

    TESTING = True
    SUPABASE_URL = None
    SUPABASE_SERVICE_KEY = None
    ANTHROPIC_API_KEY = None
    TIMEZONE = 'UTC'
    MAX_MESSAGE_LENGTH = 2000
    PROFILE_SEARCH_LIMIT = 10
    FALLBACK_REPLY = "I'm here for you. Tell me more, and I'll listen."


def create_mock_supabase_response(data=None, count=None):
    """Create a properly structured Supabase response mock"""
    response = MagicMock()
    response.data = data if data is not None else []
    response.count = count
    return response


class FakeConnectionService:
    """In-memory stand-in for ConnectionService"""

    def __init__(self, candidates=None, error=None):
        self.candidates = candidates or []
        self.error = error
        self.calls = []

    def get_route_candidates(self, profile_id):
        self.calls.append(profile_id)
        if self.error:
            raise self.error
        return list(self.candidates)


class FakeMessageService:
    """Records writes instead of persisting them"""

    def __init__(self, fail_forward=False, fail_log=False):
        self.fail_forward = fail_forward
        self.fail_log = fail_log
        self.forwarded = []
        self.logs = []

    def forward_message(self, sender_id, recipient_id, content):
        if self.fail_forward:
            raise PersistenceError("forward_message failed: insert rejected")
        record = {'sender_id': sender_id, 'recipient_id': recipient_id, 'content': content}
        self.forwarded.append(record)
        return record

    def log_conversation(self, profile_id, message, reply):
        if self.fail_log:
            raise PersistenceError("log_conversation failed: insert rejected")
        record = {'user_id': profile_id, 'message': message, 'response': reply}
        self.logs.append(record)
        return record

    @property
    def writes(self):
        return len(self.forwarded) + len(self.logs)


class FakeModelClient:
    """Returns a canned reply, or raises UpstreamError"""

    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.calls = []

    def generate(self, system_prompt, user_text):
        self.calls.append({'system': system_prompt, 'user': user_text})
        if self.error:
            raise UpstreamError(self.error)
        return self.output


@pytest.fixture(scope="session")
def test_config():
    """Create a test configuration object"""
    return TestConfig


@pytest.fixture
def mom_jane():
    return {'id': 'jane-1', 'name': 'Mom Jane', 'relationship': 'mother',
            'role': 'relative', 'mission_name': None}


@pytest.fixture
def uncle_bob():
    return {'id': 'bob-1', 'name': 'Bob Stone', 'relationship': 'uncle',
            'role': 'relative', 'mission_name': None}


@pytest.fixture
def make_router(test_config):
    """Build a MessageRouter around fakes and hand back all the pieces"""
    def factory(output=None, candidates=None, model_error=None, connection_error=None,
                fail_forward=False, fail_log=False):
        connections = FakeConnectionService(candidates, connection_error)
        messages = FakeMessageService(fail_forward, fail_log)
        model = FakeModelClient(output, model_error)
        router = MessageRouter(connections, messages, model, test_config)
        return router, connections, messages, model
    return factory


@pytest.fixture(scope="function")
def mock_db():
    """Mock Supabase client whose query builder chains back to itself"""
    db = MagicMock()

    # Create chainable mock that returns itself for most operations
    mock_query = MagicMock()
    for method in ('select', 'insert', 'update', 'delete', 'eq', 'neq', 'or_',
                   'ilike', 'is_', 'in_', 'order', 'limit', 'single'):
        getattr(mock_query, method).return_value = mock_query

    # Configure execute to return proper response structure
    mock_query.execute.return_value = create_mock_supabase_response([])

    # Configure table method
    db.table.return_value = mock_query
    db.query = mock_query

    return db
