from django.contrib.auth.hashers import check_password, make_password

from apps.auth.hashers import StorefrontBCryptPasswordHasher, bcrypt_input


def test_default_hasher_writes_bcrypt_with_cost_ten():
    encoded = make_password("secret123")
    algorithm, bcrypt_hash = encoded.split("$", 1)
    assert algorithm == StorefrontBCryptPasswordHasher.algorithm
    assert bcrypt_hash.startswith("$2b$10$")
    assert check_password("secret123", encoded)
    assert not check_password("wrong", encoded)


def test_password_is_cut_to_72_bytes_before_hashing():
    long_password = "a" * 72
    encoded = make_password(long_password + "tail")
    assert check_password(long_password, encoded)
    assert check_password(long_password + "other tail", encoded)
    assert not check_password("a" * 71, encoded)


def test_multibyte_password_over_72_bytes_round_trips():
    password = "€" * 30
    encoded = make_password(password)
    assert check_password(password, encoded)
    assert not check_password("€" * 23, encoded)


def test_bcrypt_input_counts_bytes_not_characters():
    assert len(bcrypt_input("é" * 40)) == 72
    assert bcrypt_input(b"short") == b"short"
