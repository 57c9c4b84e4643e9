"""API Key Generation — random role credentials.

Invariants:
    - Keys are 55 chars of lowercase base32 alphabet (a-z, 2-7)
    - Source is the secrets module (CSPRNG), never random
"""

import secrets

API_KEY_LENGTH = 55
_ALPHABET = "abcdefghijklmnopqrstuvwxyz234567"


def generate_api_key() -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(API_KEY_LENGTH))
