"""Vulture whitelist — false positives that are actually used by consumers or frameworks."""

# ---------------------------------------------------------------------------
# Public API (used by consumers, not internally)
# ---------------------------------------------------------------------------
from hush_jwt.config import JWTConfig
from hush_jwt.engine import TokenEngine
from hush_jwt.integrations.fastapi import create_require_token_dep

JWTConfig.from_mapping
TokenEngine.config
TokenEngine.authenticate
create_require_token_dep

# ---------------------------------------------------------------------------
# Dataclass / config fields (read by callers)
# ---------------------------------------------------------------------------
_.public_key
_.private_key
_.password
_.keys
_.as_dict
