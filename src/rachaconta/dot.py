from typing import Dict, List, Sequence

from .models import AnonymousGroup, AnonymousMember, Balance, Identity, Transfer
from .money import format_cents
from .settlement import expand_group_transfers

RANKDIRS = ("LR", "RL", "TB", "BT")


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def render_dot(
    balances: Sequence[Balance], transfers: Sequence[Transfer], rankdir: str = "LR"
) -> str:
    """Graphviz digraph of the settlement, one node per person.

    The anonymous group becomes ``count`` separate nodes and its transfers
    are fanned out per member.
    """
    if rankdir not in RANKDIRS:
        raise ValueError(f"rankdir must be one of {RANKDIRS}: {rankdir}")

    ids: Dict[Identity, int] = {}
    lines: List[str] = ["digraph {", f"    rankdir={rankdir};"]

    def add_node(who: Identity):
        ids[who] = len(ids)
        lines.append(f"    {ids[who]} [ label = {_quote(who.identifier())} ]")

    for b in balances:
        if isinstance(b.who, AnonymousGroup):
            for index in range(b.who.count):
                add_node(AnonymousMember(b.who.count, index))
        else:
            add_node(b.who)

    for t in expand_group_transfers(transfers):
        lines.append(
            f"    {ids[t.sender]} -> {ids[t.receiver]} "
            f"[ label = {_quote(format_cents(t.amount_cents))} ]"
        )
    lines.append("}")
    return "\n".join(lines)
