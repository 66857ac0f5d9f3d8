import os

import bcrypt

# 10 rounds keeps a verification in the ~100ms range on commodity hardware
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))


def _encode(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes
    return password.encode("utf-8")[:72]


def get_password_hash(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False
