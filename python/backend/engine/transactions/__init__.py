from backend.engine.transactions.generator import (
    TransactionGenerator,
    bubble_sort_transactions,
    generate_transactions,
    replay,
    selection_sort_transactions,
)

__all__ = [
    "TransactionGenerator",
    "bubble_sort_transactions",
    "generate_transactions",
    "replay",
    "selection_sort_transactions",
]
