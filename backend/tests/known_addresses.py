"""Well-known program and sysvar addresses used as expected values in tests."""

SYSTEM_PROGRAM = "11111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
RENT_SYSVAR = "SysvarRent111111111111111111111111111111111"
