from typing import List, Sequence

from .models import AnonymousGroup, AnonymousMember, Balance, Transfer
from .money import Cents, format_cents
from .settlement import apply_transfers, expand_group_transfers


def block_title(balance: Balance) -> str:
    who = balance.who
    if isinstance(who, AnonymousGroup) and who.count > 1:
        return f"Cada uma das outras {who.count} pessoas"
    return who.identifier()


def render_report(
    share: Cents, balances: Sequence[Balance], transfers: Sequence[Transfer]
) -> str:
    """Human-readable settlement, one block per balance in input order.

    The anonymous block shows the exact cents paid by its first member, so
    its lines add up to the per-person total. Other members may differ by a
    cent per line.
    """
    total = sum(b.paid * b.who.size for b in balances)
    people = sum(b.who.size for b in balances)

    lines: List[str] = [
        f"Total: {format_cents(total)} | Pessoas: {people} | "
        f"Cada um: {format_cents(share)}"
    ]
    expanded = expand_group_transfers(transfers)
    for b in balances:
        if isinstance(b.who, AnonymousGroup):
            first = AnonymousMember(b.who.count, 0)
            debts = [t for t in expanded if t.sender == first]
        else:
            debts = [t for t in transfers if t.sender == b.who]
        to_pay = sum(t.amount_cents for t in debts)
        to_receive = sum(t.amount_cents for t in transfers if t.receiver == b.who)

        lines.append("")
        lines.append(f"{block_title(b)}:")
        lines.append(f"    total a pagar: {format_cents(to_pay)}")
        lines.append(f"    total a receber: {format_cents(to_receive)}")
        if debts:
            lines.append("")
        for t in debts:
            lines.append(
                f"    pagar: {format_cents(t.amount_cents)} -> "
                f"{t.receiver.identifier()}"
            )
    return "\n".join(lines)


def render_verification(
    balances: Sequence[Balance], transfers: Sequence[Transfer]
) -> str:
    """Totals plus a per-participant check that every balance closes."""
    paid = sum(b.paid * b.who.size for b in balances)
    credit = sum(b.aggregate_net for b in balances if b.net > 0)
    debt = sum(b.aggregate_net for b in balances if b.net < 0)
    moved = sum(t.amount_cents for t in transfers)
    nonzero = sum(1 for b in balances if b.net)

    lines = [
        "=== Verificação ===",
        f"Total pago: {format_cents(paid)}",
        f"Total a receber: {format_cents(credit)}",
        f"Total a pagar: {format_cents(-debt)}",
        f"Erro de soma: {credit + debt} centavo(s)",
        f"Transferências: {len(transfers)} (limite {max(nonzero - 1, 0)})",
        f"Valor transferido: {format_cents(moved)}",
        "",
        "Por pessoa:",
    ]
    remaining = apply_transfers(balances, transfers)
    for b in balances:
        out_amt = sum(t.amount_cents for t in transfers if t.sender == b.who)
        in_amt = sum(t.amount_cents for t in transfers if t.receiver == b.who)
        status = "✓" if remaining[b.who] == 0 else "✗"
        lines.append(
            f"  {b.who.identifier():20s}: saída={format_cents(out_amt):>9s}, "
            f"entrada={format_cents(in_amt):>9s}, "
            f"saldo={format_cents(b.aggregate_net):>9s} {status}"
        )
    return "\n".join(lines)
