"""Infrastructure Layer — Store backends, connection pool and logging setup.

Invariants:
    - Everything that performs IO lives here; core/ stays pure
    - Driver exceptions never leave this package untranslated
"""
