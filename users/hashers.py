"""Django password hasher backed by :mod:`users.passwords`."""

import secrets

from django.conf import settings
from django.contrib.auth.hashers import BasePasswordHasher, mask_hash
from django.utils.translation import gettext_noop as _

from . import passwords


class ScryptPasswordHasher(BasePasswordHasher):
    """
    Store passwords in the ``scrypt$...`` format from :mod:`users.passwords`.

    The cost parameters come from ``settings.PASSWORD_SCRYPT_PARAMS``; hashes
    written with other parameters are upgraded on the next successful login.
    """

    algorithm = passwords.ALGORITHM

    def _params(self):
        return getattr(settings, "PASSWORD_SCRYPT_PARAMS", None)

    def salt(self):
        return passwords.b64url_encode(secrets.token_bytes(passwords.SALT_BYTES))

    def encode(self, password, salt):
        self._check_encode_args(password, salt)
        return passwords.hash_password(
            password, params=self._params(), salt=passwords.b64url_decode(salt)
        )

    def verify(self, password, encoded):
        return passwords.verify_password(password, encoded)

    def decode(self, encoded):
        decoded = passwords.decode_hash(encoded)
        if decoded is None:
            raise ValueError("Unrecognized scrypt password hash")
        return {
            "algorithm": self.algorithm,
            "params": decoded["params"],
            "salt": passwords.b64url_encode(decoded["salt"]),
            "hash": passwords.b64url_encode(decoded["hash"]),
        }

    def safe_summary(self, encoded):
        decoded = self.decode(encoded)
        params = decoded["params"] or passwords.DEFAULT_PARAMS
        return {
            _("algorithm"): decoded["algorithm"],
            _("work factor"): params["N"],
            _("block size"): params["r"],
            _("parallelism"): params["p"],
            _("salt"): mask_hash(decoded["salt"]),
            _("hash"): mask_hash(decoded["hash"]),
        }

    def must_update(self, encoded):
        decoded = passwords.decode_hash(encoded)
        if decoded is None:
            return True
        return decoded["params"] != self._params()

    def harden_runtime(self, password, encoded):
        # scrypt cost is fixed per hash; nothing to pad.
        pass
