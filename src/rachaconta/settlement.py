from typing import Dict, List, Sequence
import heapq

from .models import AnonymousGroup, AnonymousMember, Balance, Identity, Transfer
from .money import Cents


def compute_transfers(balances: Sequence[Balance]) -> List[Transfer]:
    """Greedy largest-debtor / largest-creditor matching.

    The anonymous group is matched as a single debtor owing its aggregate.
    Ties go to whoever comes first in ``balances``. Every step zeroes at
    least one side, so ``n`` non-zero balances give at most ``n - 1``
    transfers.
    """
    debtors = []
    creditors = []
    for pos, b in enumerate(balances):
        amount = b.aggregate_net
        if amount < 0:
            debtors.append((amount, pos, b.who))
        elif amount > 0:
            creditors.append((-amount, pos, b.who))
    heapq.heapify(debtors)
    heapq.heapify(creditors)

    if sum(d[0] for d in debtors) != sum(c[0] for c in creditors):
        raise ValueError("Balances must sum to 0")

    transfers: List[Transfer] = []
    while debtors and creditors:
        d_neg, d_pos, debtor = heapq.heappop(debtors)
        c_neg, c_pos, creditor = heapq.heappop(creditors)
        amount = min(-d_neg, -c_neg)
        transfers.append(Transfer(debtor, creditor, amount))

        if -d_neg > amount:
            heapq.heappush(debtors, (d_neg + amount, d_pos, debtor))
        if -c_neg > amount:
            heapq.heappush(creditors, (c_neg + amount, c_pos, creditor))

    return transfers


def expand_group_transfers(transfers: Sequence[Transfer]) -> List[Transfer]:
    """Fan each anonymous-group transfer out into one transfer per member.

    An aggregate of ``a`` cents over ``k`` members gives everyone ``a // k``;
    the ``a % k`` leftover cents rotate across members from one transfer to
    the next, so each member's total is exactly the per-capita share.
    Members with a zero part are left out.
    """
    out: List[Transfer] = []
    cursor: Dict[int, int] = {}
    for t in transfers:
        if not isinstance(t.sender, AnonymousGroup):
            out.append(t)
            continue
        k = t.sender.count
        base, leftover = divmod(t.amount_cents, k)
        start = cursor.get(k, 0)
        bumped = {(start + j) % k for j in range(leftover)}
        cursor[k] = (start + leftover) % k
        for index in range(k):
            amount = base + (1 if index in bumped else 0)
            if amount:
                out.append(Transfer(AnonymousMember(k, index), t.receiver, amount))
    return out


def apply_transfers(
    balances: Sequence[Balance], transfers: Sequence[Transfer]
) -> Dict[Identity, Cents]:
    """Aggregate nets left over after every transfer is paid."""
    remaining = {b.who: b.aggregate_net for b in balances}
    for t in transfers:
        remaining[t.sender] = remaining.get(t.sender, 0) + t.amount_cents
        remaining[t.receiver] = remaining.get(t.receiver, 0) - t.amount_cents
    return remaining


def check_settlement(balances: Sequence[Balance], transfers: Sequence[Transfer]):
    """Validate that ``transfers`` close every balance exactly."""
    known = {b.who for b in balances}

    for t in transfers:
        if t.sender == t.receiver:
            raise AssertionError(f"Self transfer found: {t.sender.identifier()}")
        if t.amount_cents <= 0:
            raise AssertionError(
                f"Non-positive transfer found: {t.sender.identifier()}->"
                f"{t.receiver.identifier()}: {t.amount_cents}"
            )
        for who in (t.sender, t.receiver):
            if who not in known:
                raise AssertionError(f"Unknown participant in transfer: {who!r}")

    total = sum(b.aggregate_net for b in balances)
    if total != 0:
        raise AssertionError(f"Input balances don't sum to zero: error={total}")

    for who, left in apply_transfers(balances, transfers).items():
        if left != 0:
            raise AssertionError(
                f"Balance not settled at {who.identifier()}: remaining={left}"
            )

    return True
