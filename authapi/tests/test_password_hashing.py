from __future__ import annotations

import pytest

from authapi.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_hash_is_not_plaintext_and_verifies(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret1")

    assert hashed != "secret1"
    assert "secret1" not in hashed
    assert hasher.verify("secret1", hashed) is True


@pytest.mark.parametrize("other", ["secret2", "Secret1", "secret1 ", ""])
def test_verify_rejects_other_strings(hasher: WerkzeugPasswordHasher, other: str) -> None:
    hashed = hasher.hash("secret1")

    assert hasher.verify(other, hashed) is False


def test_same_password_gets_distinct_salts(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_work_factor_is_recorded_in_hash(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.hash("secret1").startswith("pbkdf2:sha256:1000$")


def test_hash_from_other_work_factor_still_verifies(hasher: WerkzeugPasswordHasher) -> None:
    legacy = WerkzeugPasswordHasher(method="pbkdf2:sha256:2000").hash("secret1")

    assert hasher.verify("secret1", legacy) is True


@pytest.mark.parametrize("stored", ["", "not-a-hash", "unknown:method$salt$value"])
def test_verify_malformed_hash_returns_false(
    hasher: WerkzeugPasswordHasher, stored: str
) -> None:
    assert hasher.verify("secret1", stored) is False
