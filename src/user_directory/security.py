import bcrypt


def generate_salt(rounds: int) -> bytes:
    return bcrypt.gensalt(rounds=rounds)


def hash_password(password: str, salt: bytes | str) -> str:
    """Hash a plaintext password with bcrypt.

    ``salt`` may be a fresh salt from `generate_salt` or an existing hash, in
    which case bcrypt reuses the salt and cost factor embedded in it.
    """
    if isinstance(salt, str):
        salt = salt.encode("utf-8")
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
