from django.conf import settings
from django.contrib.auth.hashers import BCryptPasswordHasher
from django.utils.crypto import constant_time_compare

BCRYPT_MAX_BYTES = 72


def bcrypt_input(password) -> bytes:
    """UTF-8 bytes of ``password`` cut to the part bcrypt actually reads."""
    if isinstance(password, str):
        password = password.encode("utf-8")
    return password[:BCRYPT_MAX_BYTES]


class StorefrontBCryptPasswordHasher(BCryptPasswordHasher):
    """
    Plain bcrypt at the cost factor the existing password rows were written with.

    Passwords longer than 72 bytes are truncated before hashing, the same way
    the rows already in the store were produced, so they keep verifying.
    """

    rounds = getattr(settings, 'PASSWORD_HASH_ROUNDS', 10)

    def encode(self, password, salt):
        bcrypt = self._load_library()
        data = bcrypt.hashpw(bcrypt_input(password), salt)
        return "%s$%s" % (self.algorithm, data.decode("ascii"))

    def verify(self, password, encoded):
        algorithm, data = encoded.split("$", 1)
        if algorithm != self.algorithm:
            return False
        return constant_time_compare(encoded, self.encode(password, data.encode("ascii")))
