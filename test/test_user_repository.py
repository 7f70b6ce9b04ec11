import pytest

from repositories.user_repository import UserRepository
from shared.exceptions import DuplicateCredential


@pytest.fixture
def repo(database):
    repo = UserRepository.from_database(database)
    repo.ensure_indexes()
    return repo


def test_create_and_get_by_email(repo, users_collection):
    created = repo.create("alice", "a@x.com", "$2b$04$hash")

    found = repo.get_by_email("a@x.com")

    assert found.id == created.id == str(users_collection.docs[0]["_id"])
    assert found.username == "alice"
    assert found.password == "$2b$04$hash"
    assert found.created_at


def test_get_unknown_email_returns_none(repo):
    assert repo.get_by_email("ghost@x.com") is None


def test_unique_index_violation_maps_to_duplicate_credential(repo, users_collection):
    repo.create("alice", "a@x.com", "h1")

    with pytest.raises(DuplicateCredential):
        repo.create("alice-again", "a@x.com", "h2")
    assert len(users_collection.docs) == 1
