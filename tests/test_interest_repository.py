import pytest

from paperpilot.database.interest_repository import InterestRepository, validate_interests
from paperpilot.database.user_repository import UserRepository
from paperpilot.errors import UserNotFoundError, ValidationError


@pytest.fixture
def user_id(session_factory) -> str:
    user = UserRepository(session_factory).create(email="a@b.com", password_hash="x")
    return user.id


@pytest.fixture
def repo(session_factory) -> InterestRepository:
    return InterestRepository(session_factory, max_interests=10)


def test_validate_wraps_single_string() -> None:
    assert validate_interests("ml") == ["ml"]


def test_validate_trims_and_dedupes_keeping_first() -> None:
    assert validate_interests([" nlp", "ml", "nlp ", "ml"]) == ["nlp", "ml"]


@pytest.mark.parametrize("value", [
    [f"topic-{i}" for i in range(11)],
    ["ml", ""],
    ["ml", "   "],
    ["ml", 3],
    ["ml", None],
    {"ml": True},
    None,
])
def test_validate_rejects(value) -> None:
    with pytest.raises(ValidationError):
        validate_interests(value)


def test_ten_unique_interests_allowed() -> None:
    assert len(validate_interests([f"t{i}" for i in range(10)])) == 10


def test_cap_applies_after_dedupe() -> None:
    topics = [f"t{i}" for i in range(10)] + ["t3"]

    assert validate_interests(topics) == [f"t{i}" for i in range(10)]
    with pytest.raises(ValidationError):
        validate_interests(topics + ["t10"])



def test_new_user_has_no_interests(repo, user_id) -> None:
    interests, updated_at = repo.get_with_timestamp(user_id)
    assert interests == []
    assert updated_at is None


def test_set_stores_deduplicated_set(repo, user_id) -> None:
    stored = repo.set(user_id, ["ml", "ml", "nlp"])

    assert stored == ["ml", "nlp"]
    assert repo.get(user_id) == ["ml", "nlp"]
    _, updated_at = repo.get_with_timestamp(user_id)
    assert updated_at is not None


def test_set_replaces_instead_of_merging(repo, user_id) -> None:
    repo.set(user_id, ["ml", "nlp"])
    repo.set(user_id, ["robotics"])
    assert repo.get(user_id) == ["robotics"]


def test_invalid_update_leaves_store_untouched(repo, user_id) -> None:
    repo.set(user_id, ["ml"])
    with pytest.raises(ValidationError):
        repo.set(user_id, [f"t{i}" for i in range(11)])
    assert repo.get(user_id) == ["ml"]


def test_unknown_user(repo) -> None:
    with pytest.raises(UserNotFoundError):
        repo.get("missing")
    with pytest.raises(UserNotFoundError):
        repo.set("missing", ["ml"])
