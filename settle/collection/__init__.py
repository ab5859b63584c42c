from .chain import ChainPolicy, chain

__all__ = (
    # Policies
    "ChainPolicy",
    # Chain
    "chain",
)
