"""FIFO Lot Matching: Realized PNL from offsetting trades.

FIFO Logic:
- Each symbol has an independent queue of open lots, oldest first
- buy / cover push a new lot at the tail
- sell / short consume from the head: profit accrues as
  (close_price - lot.price) × matched_qty
- Partially consumed lots keep their remainder, exhausted lots are dequeued
- Closing quantity with nothing left to match contributes nothing

Two variants are provided:
- Intraday (trading view): only today's trades, replayed in time order.
  Credits round trips opened and closed on the same day.
- Full history: all trades before today rebuild the open queues, then
  today's closing trades are matched against them in ledger order.

Each call builds its queues from scratch; nothing is shared between calls.
"""

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from portfolio_metrics.domain.models import Trade


# =============================================================================
# FIFO Data Structures
# =============================================================================

@dataclass
class OpenLot:
    """Remaining open quantity at an opening price."""
    qty: float
    price: float


class LotBook:
    """Per-symbol FIFO queues of open lots.

    Example:
        >>> book = LotBook()
        >>> book.open("AAPL", 1, 10.0)
        >>> book.open("AAPL", 1, 12.0)
        >>> book.close("AAPL", 1, 20.0)
        10.0
        >>> book.open_quantity("AAPL")
        1
    """

    def __init__(self) -> None:
        self._queues: defaultdict[str, deque[OpenLot]] = defaultdict(deque)

    def open(self, symbol: str, qty: float, price: float) -> None:
        """Push a new lot at the tail of the symbol's queue."""
        if qty <= 0:
            return
        self._queues[symbol].append(OpenLot(qty, price))

    def close(self, symbol: str, qty: float, price: float) -> float:
        """Consume open lots from the head of the queue.

        Args:
            symbol: Instrument identifier
            qty: Quantity to close
            price: Closing price

        Returns:
            Profit of the matched quantity (negative for a loss)
        """
        queue = self._queues.get(symbol)
        pnl = 0.0
        remain = qty

        while remain > 0 and queue:
            lot = queue[0]
            take = min(lot.qty, remain)
            pnl += (price - lot.price) * take
            lot.qty -= take
            remain -= take
            if lot.qty <= 0:
                queue.popleft()

        return pnl

    def apply(self, trade: Trade) -> float:
        """Replay a single trade, returning the PNL it realizes."""
        if trade.is_opening:
            self.open(trade.symbol, trade.quantity, trade.price)
            return 0.0
        return self.close(trade.symbol, trade.quantity, trade.price)

    def open_quantity(self, symbol: str) -> float:
        """Total open quantity held in the symbol's queue."""
        return sum(lot.qty for lot in self._queues.get(symbol, ()))

    def lots(self, symbol: str) -> list[OpenLot]:
        """Snapshot of the symbol's open lots, oldest first."""
        return [OpenLot(lot.qty, lot.price) for lot in self._queues.get(symbol, ())]

    def symbols(self) -> list[str]:
        """Symbols that still hold open lots."""
        return sorted(s for s, queue in self._queues.items() if queue)

    def __iter__(self) -> Iterator[tuple[str, list[OpenLot]]]:
        for symbol in self.symbols():
            yield symbol, self.lots(symbol)


# =============================================================================
# Helpers
# =============================================================================

def _chronological(trades: Iterable[Trade]) -> list[Trade]:
    """Stable sort by date; ties keep ledger order."""
    return sorted(trades, key=lambda t: t.date)


def split_by_day(trades: Sequence[Trade], today: str) -> tuple[list[Trade], list[Trade]]:
    """Split trades into (dated today, dated any other day), keeping order."""
    todays: list[Trade] = []
    others: list[Trade] = []
    for trade in trades:
        (todays if trade.on_day(today) else others).append(trade)
    return todays, others


# =============================================================================
# Variants
# =============================================================================

def calculate_intraday_trade_pnl(trades: Sequence[Trade], today: str) -> float:
    """Calculate same-day round-trip PNL (trading view).

    Only trades dated today are replayed, in time order, against
    queues that start empty. Lots still open at the end of the
    replay contribute nothing.

    Args:
        trades: Full trade ledger
        today: Calendar day (YYYY-MM-DD)

    Returns:
        Sum of matched profit

    Example:
        >>> trades = [
        ...     Trade("2024-01-15T09:30:00", "AAPL", "buy", 100, 10.0),
        ...     Trade("2024-01-15T10:00:00", "AAPL", "sell", 100, 11.0),
        ... ]
        >>> calculate_intraday_trade_pnl(trades, "2024-01-15")
        100.0
    """
    todays, _ = split_by_day(trades, today)
    book = LotBook()
    pnl = 0.0
    for trade in _chronological(todays):
        pnl += book.apply(trade)
    return pnl


def build_lot_book(trades: Iterable[Trade]) -> LotBook:
    """Replay trades chronologically into a fresh book.

    Realized PNL of the replay is discarded; only the resulting open
    state is kept.
    """
    book = LotBook()
    for trade in _chronological(trades):
        book.apply(trade)
    return book


def calculate_today_fifo_pnl(trades: Sequence[Trade], today: str) -> float:
    """Calculate today's closing PNL against historically opened lots.

    Queues are rebuilt from every trade strictly before today
    (future-dated trades are ignored). Today's sell and
    short trades are then matched in ledger order (not re-sorted).
    Today's buys and covers are not applied.

    Args:
        trades: Full trade ledger
        today: Calendar day (YYYY-MM-DD)

    Returns:
        Sum of profit realized today against pre-today lots
    """
    todays, others = split_by_day(trades, today)
    book = build_lot_book(t for t in others if t.day < today)

    pnl = 0.0
    for trade in todays:
        if trade.is_closing:
            pnl += book.close(trade.symbol, trade.quantity, trade.price)
    return pnl
