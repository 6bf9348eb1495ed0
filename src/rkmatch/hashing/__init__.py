from rkmatch.hashing.modular import mod_add, mod_mul, mod_sub
from rkmatch.hashing.rolling import (
    RollingHashState,
    hash_window,
    roll,
    rolling_init,
    rolling_init_from_config,
    window_hashes,
)
