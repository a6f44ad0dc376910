"""Unit tests for InMemoryUserRepository."""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from user_api.app.domain.errors import InvalidArgumentError, NotFoundError, ValidationError
from user_api.app.domain.user import User
from user_api.app.repositories.memory import InMemoryUserRepository


def test_create_assigns_sequential_ids_and_equal_timestamps(repository: InMemoryUserRepository) -> None:
    alice = repository.create(User(name="Alice", email="alice@example.com"))
    bob = repository.create(User(name="Bob", email="bob@example.com"))

    assert alice.id == 1
    assert alice.created_at == alice.updated_at
    assert alice.created_at.tzinfo is not None
    assert bob.id == 2


def test_create_ignores_caller_supplied_id_and_timestamps(repository: InMemoryUserRepository, clock) -> None:
    bogus = clock()
    created = repository.create(User(id=42, name="Alice", email="a@x", created_at=bogus, updated_at=bogus))

    assert created.id == 1
    assert created.created_at != bogus
    with pytest.raises(NotFoundError):
        repository.get_by_id(42)


@pytest.mark.parametrize("bad", [None, {"name": "Alice", "email": "a@x"}])
def test_create_rejects_missing_record(repository: InMemoryUserRepository, bad) -> None:
    with pytest.raises(InvalidArgumentError):
        repository.create(bad)
    # A rejected call does not consume an id.
    assert repository.create(User(name="Alice", email="a@x")).id == 1


def test_get_by_id_returns_created_record(repository: InMemoryUserRepository) -> None:
    created = repository.create(User(name="Alice", email="alice@example.com"))

    assert repository.get_by_id(created.id) == created


def test_get_by_id_missing_is_not_found(repository: InMemoryUserRepository) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        repository.get_by_id(999)

    assert excinfo.value.message == "user not found"
    assert not isinstance(excinfo.value, (ValidationError, InvalidArgumentError))


def test_list_on_fresh_repository_is_empty_list(repository: InMemoryUserRepository) -> None:
    assert repository.list() == []


def test_list_returns_every_record(repository: InMemoryUserRepository) -> None:
    repository.create(User(name="Alice", email="a@x"))
    repository.create(User(name="Bob", email="b@x"))

    assert sorted(u.name for u in repository.list()) == ["Alice", "Bob"]


def test_update_replaces_fields_and_preserves_identity(repository: InMemoryUserRepository) -> None:
    created = repository.create(User(name="Alice", email="alice@example.com"))

    updated = repository.update(User(id=1, name="Alice Cooper", email="acooper@example.com"))

    assert updated.id == created.id
    assert updated.name == "Alice Cooper"
    assert updated.email == "acooper@example.com"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at
    assert repository.get_by_id(1) == updated


def test_update_ignores_supplied_timestamps(repository: InMemoryUserRepository, clock) -> None:
    created = repository.create(User(name="Alice", email="a@x"))
    future = clock.now.replace(year=2100)

    updated = repository.update(User(id=1, name="A", email="a@x", created_at=future, updated_at=future))

    assert updated.created_at == created.created_at
    assert updated.updated_at < future


def test_update_never_moves_updated_at_backwards() -> None:
    readings = iter(["2024-01-02", "2024-01-01"])
    repository = InMemoryUserRepository(
        clock=lambda: datetime.fromisoformat(next(readings)).replace(tzinfo=timezone.utc)
    )
    created = repository.create(User(name="Alice", email="a@x"))

    updated = repository.update(User(id=created.id, name="B", email="b@x"))

    assert updated.updated_at == created.updated_at


def test_update_missing_is_not_found_and_does_not_create(repository: InMemoryUserRepository) -> None:
    with pytest.raises(NotFoundError):
        repository.update(User(id=7, name="Ghost", email="g@x"))

    assert repository.list() == []
    assert repository.create(User(name="Alice", email="a@x")).id == 1


def test_update_rejects_missing_record(repository: InMemoryUserRepository) -> None:
    with pytest.raises(InvalidArgumentError):
        repository.update(None)


def test_delete_is_final_and_ids_are_never_reused(repository: InMemoryUserRepository) -> None:
    repository.create(User(name="Alice", email="alice@example.com"))
    repository.create(User(name="Bob", email="bob@example.com"))

    repository.delete(1)

    with pytest.raises(NotFoundError):
        repository.get_by_id(1)
    carol = repository.create(User(name="Carol", email="carol@example.com"))
    assert carol.id == 3


def test_delete_missing_is_not_found(repository: InMemoryUserRepository) -> None:
    repository.create(User(name="Alice", email="a@x"))
    repository.delete(1)

    with pytest.raises(NotFoundError):
        repository.delete(1)


def test_returned_records_are_isolated_copies(repository: InMemoryUserRepository) -> None:
    source = User(name="Alice", email="alice@example.com")
    created = repository.create(source)

    source.name = "changed input"
    created.name = "changed create result"
    repository.get_by_id(1).name = "changed get result"
    repository.list()[0].email = "changed list result"
    updated = repository.update(User(id=1, name="Alice", email="alice@example.com"))
    updated.name = "changed update result"

    stored = repository.get_by_id(1)
    assert stored.name == "Alice"
    assert stored.email == "alice@example.com"
    assert stored is not repository.get_by_id(1)


def test_update_input_is_not_aliased(repository: InMemoryUserRepository) -> None:
    repository.create(User(name="Alice", email="a@x"))
    change = User(id=1, name="Bob", email="b@x")
    repository.update(change)

    change.name = "Mallory"

    assert repository.get_by_id(1).name == "Bob"


def test_count_tracks_live_records(repository: InMemoryUserRepository) -> None:
    repository.create(User(name="Alice", email="a@x"))
    repository.create(User(name="Bob", email="b@x"))
    repository.delete(1)

    assert repository.count() == 1


def test_concurrent_creates_get_distinct_ids() -> None:
    repository = InMemoryUserRepository()
    workers = 100
    barrier = threading.Barrier(workers)

    def create(i: int) -> int:
        barrier.wait()
        return repository.create(User(name=f"user{i}", email=f"user{i}@example.com")).id

    with ThreadPoolExecutor(max_workers=workers) as pool:
        ids = list(pool.map(create, range(workers)))

    assert len(set(ids)) == workers
    assert sorted(ids) == list(range(1, workers + 1))
    listed = repository.list()
    assert len(listed) == workers
    assert {u.id for u in listed} == set(ids)


def test_sequential_creates_issue_increasing_ids_across_threads() -> None:
    repository = InMemoryUserRepository()
    issued = []

    for i in range(20):
        # Each create completes before the next thread starts.
        thread = threading.Thread(
            target=lambda i=i: issued.append(repository.create(User(name=str(i), email="e@x")).id)
        )
        thread.start()
        thread.join()

    assert issued == sorted(issued)
    assert len(set(issued)) == len(issued)


def test_mixed_concurrent_operations_keep_store_consistent() -> None:
    repository = InMemoryUserRepository()
    for i in range(50):
        repository.create(User(name=f"seed{i}", email="s@x"))

    def churn(i: int) -> None:
        user_id = i + 1
        repository.get_by_id(user_id)
        repository.update(User(id=user_id, name=f"updated{i}", email="u@x"))
        repository.list()
        if i % 2 == 0:
            repository.delete(user_id)
        repository.create(User(name=f"new{i}", email="n@x"))

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(churn, range(50)))

    users = repository.list()
    assert len(users) == 75
    assert len({u.id for u in users}) == 75
    assert all(1 <= u.id <= 100 for u in users)
    for user in users:
        if user.id <= 50:
            assert user.id % 2 == 0
            assert user.name.startswith("updated")
            assert user.updated_at >= user.created_at


def test_get_after_create_sees_record_from_other_thread() -> None:
    repository = InMemoryUserRepository()
    results = {}

    def writer() -> None:
        results["created"] = repository.create(User(name="Alice", email="a@x"))

    thread = threading.Thread(target=writer)
    thread.start()
    thread.join()

    assert repository.get_by_id(results["created"].id) == results["created"]
