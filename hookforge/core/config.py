"""
Constants, type-to-import mappings and runtime settings
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .models import ContractArgument, ParentReference

SOLIDITY_PRAGMA = "^0.8.24"
DEFAULT_LICENSE = "MIT"

VISIBILITIES = ("public", "external", "internal", "private")
MUTABILITIES = ("pure", "view", "nonpayable", "payable")

# Lifecycle-hook base every generated contract inherits from
BASE_HOOK = ParentReference(name="BaseHook", path="../hooks/BaseHook.sol")
POOL_MANAGER_ARG = ContractArgument(name="_poolManager", type="IPoolManager")

# Types referenced by hook signatures -> source they are imported from
TYPE_IMPORTS = {
    "BalanceDelta": "v4-core/src/types/BalanceDelta.sol",
    "BeforeSwapDelta": "v4-core/src/types/BeforeSwapDelta.sol",
    "Hooks": "v4-core/src/libraries/Hooks.sol",
    "IPoolManager": "v4-core/src/interfaces/IPoolManager.sol",
    "PoolKey": "v4-core/src/types/PoolKey.sol",
}

ACCESS_MODES = (False, "ownable", "roles", "managed")
UPGRADEABLE_MODES = (False, "transparent", "uups")
CLOCK_MODES = ("blocknumber", "timestamp")


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment (and .env)"""
    output_dir: str = "./sol_out"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """Load settings, honouring a .env file in the working directory"""
    load_dotenv()
    defaults = Settings()
    return Settings(
        output_dir=os.getenv("HOOKFORGE_OUTPUT_DIR", defaults.output_dir),
        host=os.getenv("HOOKFORGE_HOST", defaults.host),
        port=int(os.getenv("HOOKFORGE_PORT", str(defaults.port))),
    )
