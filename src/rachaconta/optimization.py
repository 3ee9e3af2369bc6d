from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple
import pulp

from .models import Balance, Identity, Transfer


@dataclass
class ExactPlan:
    status: str
    transfer_count: int
    transfers: List[Transfer]


def solve_min_transfers(balances: Sequence[Balance], msg: bool = False) -> ExactPlan:
    """Minimize the number of debtor->creditor transfers exactly (MILP, CBC).

    Only used to audit the greedy plan; the problem is NP-hard, so keep the
    input small. The anonymous group is one node, like in the greedy.
    """
    debtors: List[Tuple[int, Identity, int]] = []
    creditors: List[Tuple[int, Identity, int]] = []
    for pos, b in enumerate(balances):
        amount = b.aggregate_net
        if amount < 0:
            debtors.append((pos, b.who, -amount))
        elif amount > 0:
            creditors.append((pos, b.who, amount))

    if sum(d[2] for d in debtors) != sum(c[2] for c in creditors):
        raise ValueError("Infeasible: sum(balances) must be 0")
    if not debtors:
        return ExactPlan("Optimal", 0, [])

    M = sum(c[2] for c in creditors)
    arcs = [(i, j) for i, _, _ in debtors for j, _, _ in creditors]

    prob = pulp.LpProblem("min_num_transfers", pulp.LpMinimize)

    # Integer cents: x = amount on arc, y = arc used
    x = {
        (i, j): pulp.LpVariable(f"x__{i}__{j}", lowBound=0, cat=pulp.LpInteger)
        for i, j in arcs
    }
    y = {(i, j): pulp.LpVariable(f"y__{i}__{j}", cat=pulp.LpBinary) for i, j in arcs}

    # Objective: minimize number of used arcs
    prob += pulp.lpSum(y.values())

    for i, _, owed in debtors:
        prob += pulp.lpSum(x[d, j] for d, j in arcs if d == i) == owed, f"debt_{i}"
    for j, _, due in creditors:
        prob += pulp.lpSum(x[i, c] for i, c in arcs if c == j) == due, f"credit_{j}"

    # Linking constraint: x <= M*y
    for arc in arcs:
        prob += x[arc] <= M * y[arc]

    status = prob.solve(pulp.PULP_CBC_CMD(msg=msg))
    if pulp.LpStatus[status] != "Optimal":
        raise RuntimeError(f"Exact solver not optimal: {pulp.LpStatus[status]}")

    who: Dict[int, Identity] = {pos: w for pos, w, _ in debtors + creditors}
    transfers = [
        Transfer(who[i], who[j], int(round(pulp.value(x[i, j]))))
        for i, j in arcs
        if pulp.value(x[i, j]) > 0.5
    ]
    return ExactPlan(pulp.LpStatus[status], len(transfers), transfers)
