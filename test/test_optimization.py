import pytest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src/")))
from rachaconta.balances import compute_balances
from rachaconta.models import Balance, Ledger, Named
from rachaconta.optimization import solve_min_transfers
from rachaconta.settlement import check_settlement, compute_transfers


class TestSolveMinTransfers:
    def test_three_person_settlement(self):
        """Test one debtor paying two creditors needs two transfers"""
        balances = [
            Balance(Named("Matt"), 15000, 0),
            Balance(Named("Hibiki"), 5000, 0),
            Balance(Named("Gowtham"), 0, 20000),
        ]
        plan = solve_min_transfers(balances)

        assert plan.status == "Optimal"
        assert plan.transfer_count == 2
        check_settlement(balances, plan.transfers)

    def test_exact_beats_greedy(self):
        """Test c2 settled by d1 alone while greedy pairs d1 with c1"""
        balances = [
            Balance(Named("c1"), 500, 0),
            Balance(Named("c2"), 400, 0),
            Balance(Named("d1"), 0, 400),
            Balance(Named("d2"), 0, 300),
            Balance(Named("d3"), 0, 200),
        ]
        greedy = compute_transfers(balances)
        plan = solve_min_transfers(balances)

        assert len(greedy) == 4
        assert plan.transfer_count == 3
        check_settlement(balances, plan.transfers)

    def test_never_worse_than_greedy(self):
        share, balances = compute_balances(
            Ledger.from_pairs(
                [
                    ("Ítalo", 22248),
                    ("Maria", 1450),
                    ("Ana Clara", 2248),
                    ("Luis", 14660),
                    ("Guilherme", 4876),
                    ("Rafael", 23200),
                ],
                11,
            )
        )
        plan = solve_min_transfers(balances)
        assert plan.transfer_count <= len(compute_transfers(balances))
        check_settlement(balances, plan.transfers)

    def test_nothing_to_settle(self):
        balances = [Balance(Named("a"), 100, 100), Balance(Named("b"), 0, 0)]
        plan = solve_min_transfers(balances)
        assert plan.transfer_count == 0
        assert plan.transfers == []

    def test_infeasible_balances(self):
        balances = [Balance(Named("a"), 100, 0), Balance(Named("b"), 0, 50)]
        with pytest.raises(ValueError, match="sum\\(balances\\) must be 0"):
            solve_min_transfers(balances)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
