import argparse
import sys
from typing import List, Optional, Tuple

from . import __version__
from .balances import compute_balances
from .config import ConfigError, load_settings
from .dot import RANKDIRS, render_dot
from .errors import InvalidAmount, InvalidParticipantCount, SettlementError
from .models import Ledger
from .money import Cents, parse_amount
from .optimization import solve_min_transfers
from .report import render_report, render_verification
from .settlement import check_settlement, compute_transfers

DESCRIPTION = """\
Uma CLI para dividir contas de forma justa.

Calcula quanto cada pessoa deve pagar ou receber após uma série de gastos
compartilhados, usando o menor número de transferências que a estratégia
gulosa encontra.
"""

EPILOG = """\
exemplos:
  rachaconta Rafael=50.00 Maria=30.50 "Ana Clara"=100
  rachaconta -p 5 Rafael=120 Maria=45
  rachaconta --graphviz -p 3 rafael=120 maria=45 | dot -Tpng -o contas.png
"""


def parse_key_val(token: str) -> Tuple[str, Cents]:
    name, sep, value = token.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError("use o formato NOME=VALOR")
    try:
        return name, parse_amount(value)
    except InvalidAmount as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rachaconta",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "pagamentos",
        nargs="+",
        type=parse_key_val,
        metavar="NOME=VALOR",
        help="gastos individuais: nome da pessoa, '=' e o valor pago",
    )
    p.add_argument(
        "-p",
        "--pessoas",
        type=int,
        metavar="NÚMERO",
        help=(
            "número total de pessoas que dividem os gastos; por padrão só quem "
            "pagou. Ex.: se 5 pessoas jantaram mas apenas 2 pagaram, use -p 5"
        ),
    )
    p.add_argument(
        "-g",
        "--graphviz",
        action="store_true",
        help="imprime o resultado como grafo no formato DOT do Graphviz",
    )
    p.add_argument(
        "--rankdir",
        choices=RANKDIRS,
        help="direção do grafo DOT (padrão: RACHACONTA_RANKDIR ou LR)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="imprime a verificação do acerto na saída de erro",
    )
    p.add_argument(
        "--comparar",
        action="store_true",
        help="compara o número de transferências com o mínimo exato (lento)",
    )
    p.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return 1
    verbose = settings.verbose if args.verbose is None else args.verbose
    rankdir = args.rankdir or settings.rankdir

    try:
        ledger = Ledger.from_pairs(args.pagamentos, args.pessoas)
        share, balances = compute_balances(ledger)
    except InvalidParticipantCount as e:
        print(f"Erro: {e}", file=sys.stderr)
        print(
            f"Dica: aumente -p para pelo menos {e.contributors} ou remova a opção "
            "-p para dividir apenas entre quem pagou.",
            file=sys.stderr,
        )
        return 1
    except SettlementError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return 1

    transfers = compute_transfers(balances)
    check_settlement(balances, transfers)

    if args.graphviz:
        print(render_dot(balances, transfers, rankdir))
    else:
        print(render_report(share, balances, transfers))

    if verbose:
        print(render_verification(balances, transfers), file=sys.stderr)

    if args.comparar:
        plan = solve_min_transfers(balances)
        print(
            f"Transferências: {len(transfers)} (mínimo exato: {plan.transfer_count})",
            file=sys.stderr,
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
