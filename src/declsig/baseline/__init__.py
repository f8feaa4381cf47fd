from declsig.baseline.memory import InMemoryBaselineStore

__all__ = [
    "InMemoryBaselineStore",
]
