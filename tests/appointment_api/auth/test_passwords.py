from appointment_api.auth.passwords import hash_password, verify_password


def test_hash_password_is_salted() -> None:
    first = hash_password('password', rounds=4)
    second = hash_password('password', rounds=4)

    assert first != 'password'
    assert first != second


def test_hash_password_uses_requested_cost() -> None:
    assert hash_password('password', rounds=5).startswith('$2b$05$')


def test_verify_password_matches_only_the_original_password() -> None:
    hashed = hash_password('password', rounds=4)

    assert verify_password('password', hashed) is True
    assert verify_password('Password', hashed) is False


def test_verify_password_treats_malformed_hash_as_mismatch() -> None:
    assert verify_password('password', 'not-a-bcrypt-hash') is False
