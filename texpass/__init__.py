"""
TexPass: secure password generator with purpose-aware character filtering.
"""

from .config import PasswordConfig
from .generator import generate, generate_batch, generate_password, generate_passwords
from .pools import build_pools, special_pool

__version__ = "1.0.0"

__all__ = [
    "PasswordConfig",
    "build_pools",
    "special_pool",
    "generate",
    "generate_password",
    "generate_batch",
    "generate_passwords",
    "__version__",
]
