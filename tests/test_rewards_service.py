from datetime import date
from decimal import Decimal

import pytest

from reward_program.core.errors import ErrorKind, InvalidInput, NoData, NotFound
from reward_program.db import InMemoryCustomerProvider
from reward_program.models import Customer, Transaction
from reward_program.services import RewardsService, rewards_by_name


def _customer(cid, name, *rows):
    return Customer(cid, name, tuple(Transaction(d, Decimal(str(a))) for d, a in rows))


# ---- all customers -------------------------------------------------------------


def test_all_rewards_for_ashok(service):
    rewards = service.calculate_all_rewards()
    ashok = rewards[1]

    assert ashok.customer_name == "Ashok"
    assert ashok.monthly_points == {"2024-03": 90, "2025-03": 290, "2025-04": 25, "2025-05": 250}
    assert ashok.total_points == 655


def test_all_rewards_for_kumar(service):
    kumar = service.calculate_all_rewards()[2]

    assert kumar.monthly_points["2025-03"] == 10
    assert kumar.monthly_points["2025-04"] == 110
    assert kumar.monthly_points["2025-06"] == 230
    assert kumar.total_points == 350


def test_only_months_with_transactions_are_present(service):
    chinta = service.calculate_all_rewards()[5]
    assert chinta.monthly_points == {"2025-05": 1}
    assert chinta.total_points == 1


def test_total_equals_sum_of_months_for_every_customer(service):
    for summary in service.calculate_all_rewards().values():
        assert summary.total_points == sum(summary.monthly_points.values())


def test_same_month_in_different_years_stays_separate():
    svc = RewardsService(InMemoryCustomerProvider([
        _customer(7, "Mira", (date(2024, 3, 1), 120), (date(2025, 3, 1), 120)),
    ]))
    assert svc.calculate_all_rewards()[7].monthly_points == {"2024-03": 90, "2025-03": 90}


def test_customer_without_transactions_has_zero_total():
    svc = RewardsService(InMemoryCustomerProvider([Customer(9, "Idle")]))
    summary = svc.calculate_all_rewards()[9]
    assert summary.monthly_points == {}
    assert summary.total_points == 0


def test_empty_customer_set_raises_no_data():
    svc = RewardsService(InMemoryCustomerProvider([]))
    with pytest.raises(NoData) as excinfo:
        svc.calculate_all_rewards()
    assert excinfo.value.kind is ErrorKind.NO_DATA
    assert str(excinfo.value) == "No customer data available."


def test_all_rewards_is_idempotent(service):
    assert service.calculate_all_rewards() == service.calculate_all_rewards()


def test_duplicate_names_are_kept_apart_by_id():
    svc = RewardsService(InMemoryCustomerProvider([
        _customer(1, "Sam", (date(2025, 1, 2), 75)),
        _customer(2, "Sam", (date(2025, 1, 3), 120)),
    ]))
    rewards = svc.calculate_all_rewards()

    assert rewards[1].total_points == 25
    assert rewards[2].total_points == 90

    by_name = rewards_by_name(rewards)
    assert list(by_name) == ["Sam"]
    assert by_name["Sam"].customer_id == 2


# ---- one customer, one month ---------------------------------------------------


def test_monthly_reward_for_customer(service):
    result = service.calculate_monthly_reward_for_customer(1, "2025-04")

    assert result.customer_id == 1
    assert result.customer_name == "Ashok"
    assert result.month == "2025-04"
    assert result.points == 25


def test_monthly_reward_sums_every_transaction_in_month(service):
    assert service.calculate_monthly_reward_for_customer(2, "2025-04").points == 110


def test_monthly_reward_uses_calendar_month_not_rolling_window():
    svc = RewardsService(InMemoryCustomerProvider([
        _customer(3, "Edge", (date(2025, 4, 30), 75), (date(2025, 5, 1), 120)),
    ]))
    assert svc.calculate_monthly_reward_for_customer(3, "2025-04").points == 25
    assert svc.calculate_monthly_reward_for_customer(3, "2025-05").points == 90


def test_month_without_transactions_is_zero(service):
    result = service.calculate_monthly_reward_for_customer(1, "2023-01")
    assert result.points == 0


def test_customer_id_may_arrive_as_text(service):
    assert service.calculate_monthly_reward_for_customer("1", "2025-04").points == 25


@pytest.mark.parametrize("month", ["2025-13", "2025-00", "April-2025", "2025-4", "2025/04", "", "2025-04-01"])
def test_malformed_month_raises_invalid_input(service, month):
    with pytest.raises(InvalidInput) as excinfo:
        service.calculate_monthly_reward_for_customer(1, month)
    assert str(excinfo.value) == "Invalid month format. Use yyyy-MM."


def test_month_is_validated_before_customer_lookup(service):
    with pytest.raises(InvalidInput):
        service.calculate_monthly_reward_for_customer(999, "April-2025")


def test_unknown_customer_raises_not_found(service):
    with pytest.raises(NotFound) as excinfo:
        service.calculate_monthly_reward_for_customer(999, "2025-04")
    assert str(excinfo.value) == "Customer not found with ID: 999"


@pytest.mark.parametrize("customer_id", ["abc", "0", "-3", 0, "9223372036854775808", "9" * 5000, 2 ** 63])
def test_invalid_customer_id_raises_invalid_input(service, customer_id):
    with pytest.raises(InvalidInput):
        service.calculate_monthly_reward_for_customer(customer_id, "2025-04")


# ---- one customer, every month -------------------------------------------------


def test_customer_rewards_summary(service):
    summary = service.calculate_customer_rewards(4)

    assert summary.customer_name == "Leela"
    assert summary.monthly_points == {"2024-02": 10, "2025-05": 70, "2025-08": 40, "2025-09": 230}
    assert summary.total_points == 350


def test_customer_rewards_unknown_id(service):
    with pytest.raises(NotFound):
        service.calculate_customer_rewards(42)


def test_largest_int64_customer_id_is_looked_up(service):
    with pytest.raises(NotFound):
        service.calculate_customer_rewards(2 ** 63 - 1)
