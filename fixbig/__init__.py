"""Fixed-width unsigned big integers with wrap-around arithmetic on 64-bit limbs."""

__version__ = "0.1.0"
__all__ = ["bigint", "limbs", "cli"]