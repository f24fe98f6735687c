"""Best single buy-then-sell profit."""

from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell.

    Returns 0 when no trade makes a profit.
    """
    if not prices:
        raise ValueError("max_profit() requires at least one price")
    best_profit = 0
    best_buy = prices[0]
    for price in prices[1:]:
        if price > best_buy:
            best_profit = max(best_profit, price - best_buy)
        best_buy = min(best_buy, price)
    return best_profit