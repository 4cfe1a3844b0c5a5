"""Password policy adapter - Implements PasswordValidator protocol."""

from dataclasses import dataclass

# bcrypt ignores everything past 72 bytes
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class PasswordPolicyValidator:
    """Accepts passwords of at least min_length characters and at most 72 bytes."""

    min_length: int = 8

    def is_valid(self, password: str) -> bool:
        if not isinstance(password, str):
            return False
        return len(password) >= self.min_length and len(password.encode()) <= BCRYPT_MAX_BYTES
