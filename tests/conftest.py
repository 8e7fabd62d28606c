from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from voicemail_service.app import create_app
from voicemail_service.config import AppConfig
from voicemail_service.dependencies import (
    get_config,
    get_notifier_factory,
    get_storage_factory,
)

from .fakes import (
    FakeNotifier,
    FakeStorage,
    make_config,
    notifier_factory,
    storage_factory,
)


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def config() -> AppConfig:
    return make_config()


@pytest.fixture
def app(config, storage, notifier):
    application = create_app()
    application.dependency_overrides[get_config] = lambda: config
    application.dependency_overrides[get_storage_factory] = storage_factory(storage)
    application.dependency_overrides[get_notifier_factory] = notifier_factory(notifier)
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
