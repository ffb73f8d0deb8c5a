import pytest
from faker import Faker

from approval_functions.errors import InfrastructureError

fake = Faker()

FIXED_TS = 1700000000000


class FakePlatform:
    """Records the Auth, Firestore and FCM calls a handler makes."""

    def __init__(self):
        self.claims = {}
        self.claim_updates = []
        self.documents = {}
        self.messages = []
        self.fail_on = set()

    def _maybe_fail(self, operation):
        if operation in self.fail_on:
            raise InfrastructureError(operation, RuntimeError("service unavailable"))

    def get_custom_claims(self, uid):
        self._maybe_fail('get_custom_claims')
        return dict(self.claims.get(uid, {}))

    def set_custom_user_claims(self, uid, claims):
        self._maybe_fail('set_custom_user_claims')
        self.claim_updates.append((uid, dict(claims)))
        self.claims[uid] = dict(claims)

    def add_document(self, collection, record):
        self._maybe_fail('add_document')
        docs = self.documents.setdefault(collection, [])
        docs.append(record)
        return f"doc-{len(docs)}"

    def send_message(self, token, title, body, data=None):
        self._maybe_fail('send_message')
        self.messages.append({'token': token, 'title': title, 'body': body, 'data': data})
        return f"projects/test/messages/{len(self.messages)}"

    def side_effects(self):
        return len(self.claim_updates) + len(self.messages) + sum(len(d) for d in self.documents.values())


@pytest.fixture
def platform():
    return FakePlatform()


@pytest.fixture
def clock():
    return lambda: FIXED_TS


@pytest.fixture
def uid():
    return fake.uuid4()


@pytest.fixture
def fcm_token():
    return fake.sha256()
