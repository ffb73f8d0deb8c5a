import logging
from types import SimpleNamespace

import pytest
from firebase_admin import auth

from approval_functions.admin.cli import main
from approval_functions.firebase import FirebasePlatform


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
    for h in handlers:
        root_logger.addHandler(h)
    root_logger.setLevel(level)


def test_cli_sets_admin_claim(platform, uid):
    assert main([uid], platform=platform) == 0
    assert platform.claims[uid] == {"admin": True}


def test_cli_reports_failure(platform, uid):
    platform.fail_on.add('get_custom_claims')

    assert main([uid], platform=platform) == 1
    assert platform.claim_updates == []


def test_cli_requires_uid(platform):
    with pytest.raises(SystemExit):
        main([], platform=platform)


def test_cli_rejects_empty_uid(monkeypatch):
    def invalid_uid(uid, app=None):
        raise ValueError("Invalid uid")

    monkeypatch.setattr(auth, "get_user", invalid_uid)
    platform = FirebasePlatform.__new__(FirebasePlatform)
    platform.app = None
    platform.firestore_db = SimpleNamespace()

    assert main([""], platform=platform) == 1
