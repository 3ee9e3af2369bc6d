from typing import Iterable, List, Optional, Tuple, Union

from .models import AnonymousGroup, Balance, Contribution, Ledger, Named
from .money import Cents


def compute_balances(
    ledger: Union[Ledger, Iterable[Contribution]],
    participant_count: Optional[int] = None,
) -> Tuple[Cents, List[Balance]]:
    """Per-capita share and one Balance per payer, plus the anonymous group.

    ``share`` is the total floored to whole cents. The cents lost by flooring
    are charged one at a time to creditors, ordered by net (largest first)
    then name, cycling until none are left, so that
    ``sum(b.aggregate_net) == 0`` always holds.
    """
    if isinstance(ledger, Ledger):
        if participant_count is not None:
            raise TypeError("participant_count is already set by the Ledger")
    else:
        ledger = Ledger(tuple(ledger), participant_count)

    n = ledger.participant_count
    share, remainder = divmod(ledger.total_cents, n)

    extra = _remainder_charges(ledger.contributions, share, remainder)

    balances: List[Balance] = [
        Balance(Named(c.name), c.amount_cents, share + extra.get(i, 0))
        for i, c in enumerate(ledger.contributions)
    ]
    if ledger.anonymous_count > 0:
        balances.append(Balance(AnonymousGroup(ledger.anonymous_count), 0, share))

    return share, balances


def _remainder_charges(contributions, share: Cents, remainder: Cents):
    if not remainder:
        return {}

    creditors = sorted(
        (
            (c.amount_cents - share, c.name, i)
            for i, c in enumerate(contributions)
            if c.amount_cents > share
        ),
        key=lambda x: (-x[0], x[1], x[2]),
    )
    left = {i: net for net, _, i in creditors}
    charges = {}
    # creditors hold at least ``remainder`` in total, so this terminates
    while remainder:
        for _, _, i in creditors:
            if not remainder:
                break
            if left[i] == 0:
                continue
            left[i] -= 1
            charges[i] = charges.get(i, 0) + 1
            remainder -= 1
    return charges
