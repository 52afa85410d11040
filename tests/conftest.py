"""Shared pytest fixtures for grading and assignment tests.

Provides:
- ``document_repo``: Fresh InMemoryDocumentRepository per test
- ``attempt_repo``: Fresh InMemoryAttemptRepository per test
- ``probe``: StubContentProbe that reports a fixed set of refs as present
- ``service``: TrainingService wired from the three above
"""

from __future__ import annotations

import pytest

from services.repositories import InMemoryAttemptRepository, InMemoryDocumentRepository
from services.training_service import TrainingService
from tests.stubs import StubContentProbe


@pytest.fixture
def document_repo() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def attempt_repo() -> InMemoryAttemptRepository:
    return InMemoryAttemptRepository()


@pytest.fixture
def probe() -> StubContentProbe:
    return StubContentProbe()


@pytest.fixture
def service(document_repo, attempt_repo, probe) -> TrainingService:
    return TrainingService(document_repo, attempt_repo, probe)
