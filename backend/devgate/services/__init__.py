"""Services Layer — async operations over the account/role/secret store.

Invariants:
    - Every privileged operation takes the acting Identity as an explicit argument
    - Services commit their own writes; callers never commit
    - Errors raised are DevgateError subclasses; nothing is swallowed or retried
"""
