"""Domain models and logic for the vending machine.

This package holds the in-memory machine state (coin bank, inventory, inserted
amount), the change solver and the transaction journal models. They are
independent from persistence models so that business logic and testing can
evolve without DB coupling.
"""

__all__ = [
    "change",
    "inventory",
    "journal",
    "machine",
    "money",
]
