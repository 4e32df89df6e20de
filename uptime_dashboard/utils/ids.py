import random
import string
import time

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(kind: str) -> str:
    """
    ``{kind}_{epoch milliseconds}_{9 random base36 chars}``.

    Uniqueness is best effort; the store stays authoritative.
    """
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{kind}_{int(time.time() * 1000)}_{suffix}"
