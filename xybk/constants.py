"""Protocol constants for xybk pairs.

Centralizes the factory deployment parameters and the fixed scales used by
pair math.
"""

from xybk.models.types import is_valid_address

# Basis point denominator: fee_bps is a fraction of this
BPS_DENOMINATOR = 10_000

# Reserves are scaled by this before solving for sqrtK
SQRT_K_PRECISION = 10**10

# sqrtK stored by constant product pairs and boosted pairs whose active boost is 1
CONSTANT_PRODUCT_SQRT_K = 1

# Liquidity burned on the first mint
MINIMUM_LIQUIDITY = 1000

# Default swap fee (0.3%)
DEFAULT_FEE_BPS = 30


def _validate_factory_address(address: str) -> str:
    if not is_valid_address(address):
        raise ValueError(f"Invalid factory address: {address} (must be 0x + 40 hex chars)")
    return address


# Pair factory deployment used for CREATE2 pair addresses
FACTORY_ADDRESS = _validate_factory_address("0x4233ad9b8b7c1ccf0818907908a7f0796a3df85f")
INIT_CODE_HASH = "0xfc84b622ba228c468b74c2d99bfe9454ffac280ac017f05a02feb9f739aeb1e4"

# Liquidity token metadata
LIQUIDITY_TOKEN_DECIMALS = 18
LIQUIDITY_TOKEN_SYMBOL = "IF-LP"
LIQUIDITY_TOKEN_NAME = "Impossible Swap LPs"
