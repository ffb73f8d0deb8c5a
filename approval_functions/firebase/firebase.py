import json
import logging
from typing import Any, Dict, Optional

import firebase_admin
import google.cloud.firestore
from firebase_admin import auth, credentials, firestore, messaging
from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPICallError

from ..config import settings
from ..errors import InfrastructureError

logger = logging.getLogger(__name__)


class FirebaseApp:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(FirebaseApp, cls).__new__(cls)
            cls._instance.initialized = False
        return cls._instance

    def __init__(self):
        if self.initialized:
            return
        logger.info("FirebaseApp.__init__() called")
        self.app = None
        self.connect()
        self.initialized = True

    def connect(self) -> None:
        try:
            # Try to get the existing default app
            self.app = firebase_admin.get_app()
            logger.info("Retrieved existing Firebase app")
        except ValueError:
            # Initialize new app if one doesn't exist
            self.app = firebase_admin.initialize_app(credential=self._credential())
            logger.info(f"Initialized Firebase app. App name: {self.app.name}")

    @staticmethod
    def _credential() -> credentials.Base:
        cert_json = settings.firebase_secret
        if not cert_json:
            return credentials.ApplicationDefault()
        cert_dict = json.loads(cert_json)
        if isinstance(cert_dict, str):
            cert_dict = json.loads(cert_dict)
        return credentials.Certificate(cert_dict)


class FirebasePlatform:
    """Auth, Firestore and FCM calls used by the handlers.

    Every SDK failure is re-raised as InfrastructureError so callers can
    tell a failed dependency apart from a rejected request.
    """

    def __init__(self, app: firebase_admin.App):
        self.app = app
        self.firestore_db: google.cloud.firestore.Client = firestore.client(app)

    def get_custom_claims(self, uid: str) -> Dict[str, Any]:
        try:
            user = auth.get_user(uid, app=self.app)
        except (FirebaseError, ValueError) as e:
            raise InfrastructureError("get_user", e) from e
        return dict(user.custom_claims or {})

    def set_custom_user_claims(self, uid: str, claims: Dict[str, Any]) -> None:
        try:
            auth.set_custom_user_claims(uid, claims, app=self.app)
        except (FirebaseError, ValueError) as e:
            raise InfrastructureError("set_custom_user_claims", e) from e

    def add_document(self, collection: str, record: Dict[str, Any]) -> str:
        try:
            _, doc_ref = self.firestore_db.collection(collection).add(record)
        except GoogleAPICallError as e:
            raise InfrastructureError(f"add to {collection}", e) from e
        return doc_ref.id

    def send_message(self, token: str, title: str, body: str, data: Optional[Dict[str, str]] = None) -> str:
        message = messaging.Message(
            token=token,
            notification=messaging.Notification(
                title=title,
                body=body
            ),
            data=data or {}
        )
        try:
            return messaging.send(message, app=self.app)
        except FirebaseError as e:
            raise InfrastructureError("messaging.send", e) from e


_platform: Optional[FirebasePlatform] = None


def get_platform() -> FirebasePlatform:
    """Process-wide platform handle, created on first use"""
    global _platform
    if _platform is None:
        _platform = FirebasePlatform(FirebaseApp().app)
    return _platform
