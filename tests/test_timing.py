import pytest

from flapbird.timing import WaitBudget


def test_starts_full():
    budget = WaitBudget(30)
    assert budget.remaining == 30
    assert budget.start == 30


def test_spend_reduces_remaining():
    budget = WaitBudget(30)
    left = budget.spend(10)
    assert left == budget.remaining
    assert budget.remaining == 30 - 10


def test_spend_is_cumulative():
    budget = WaitBudget(300)
    budget.spend(100)
    budget.spend(50)
    assert budget.remaining == 300 - 100 - 50


def test_overspending_drops_to_zero():
    budget = WaitBudget(30)
    assert budget.spend(45) == 0
    assert budget.remaining == 0


def test_spending_nothing_at_full_budget_drops_to_zero():
    budget = WaitBudget(30)
    assert budget.spend(0) == 0


def test_expire_refills():
    budget = WaitBudget(500)
    budget.spend(499)
    assert budget.expire() == 500
    assert budget.remaining == 500


def test_negative_elapsed_rejected():
    with pytest.raises(ValueError):
        WaitBudget(30).spend(-1)


def test_negative_start_rejected():
    with pytest.raises(ValueError):
        WaitBudget(-5)