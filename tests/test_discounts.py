import threading
from decimal import Decimal

import pytest

from storefront.errors import BusinessRuleViolation
from storefront.services.catalog import Catalog
from storefront.services.discount_service import (
    REASON_NOT_FOUND,
    REASON_SLOT_PASSED,
    REASON_USED,
)
from storefront.services.store import Store

from .conftest import CATALOG


@pytest.mark.parametrize("nth", [1, 2, 3, 5])
def test_codes_only_minted_on_nth_slot(nth):
    store = Store(Catalog.from_records(CATALOG), nth_order=nth)
    for placed in range(3 * nth):
        code = store.generate_discount_code()
        if (placed + 1) % nth == 0:
            assert code is not None
        else:
            assert code is None
        store.add_to_cart("s", "A", 1)
        store.checkout("s")
    assert all(c.order_index_condition % nth == 0 for c in store.discounts.list_codes())


def test_generate_is_idempotent_for_pending_slot(store, place_order):
    place_order()
    place_order()
    first = store.generate_discount_code()
    second = store.generate_discount_code()
    assert first == second
    assert len(store.discounts.list_codes()) == 1
    assert first.startswith("DISCOUNT_3_")


def test_generate_before_eligible_slot(store):
    assert store.generate_discount_code() is None
    assert store.discounts.list_codes() == ()


def test_validate_reasons(store, place_order):
    assert store.validate_discount_code("NOPE").reason == REASON_NOT_FOUND

    place_order()
    place_order()
    code = store.generate_discount_code()
    assert store.validate_discount_code(code).valid

    place_order(discount_code=code)
    check = store.validate_discount_code(code)
    assert not check.valid
    assert check.reason == REASON_USED


def test_skipped_slot_expires_code(store, place_order):
    place_order()
    place_order()
    code = store.generate_discount_code()

    place_order()  # slot 3 taken without the code
    check = store.validate_discount_code(code)
    assert not check.valid
    assert check.reason == REASON_SLOT_PASSED
    assert check.code.is_used is False

    # it stays dead once later slots come around
    place_order()
    place_order()
    assert store.validate_discount_code(code).reason == REASON_SLOT_PASSED
    assert store.generate_discount_code() != code


def test_mark_used_is_a_noop_for_unknown_or_used(store, place_order):
    store.discounts.mark_used("NOPE")
    place_order()
    place_order()
    code = store.generate_discount_code()
    store.discounts.mark_used(code)
    store.discounts.mark_used(code)
    assert [c.is_used for c in store.discounts.list_codes()] == [True]


def test_new_code_after_redeemed_slot(store, place_order):
    place_order()
    place_order()
    code = store.generate_discount_code()
    place_order(discount_code=code)
    assert store.generate_discount_code() is None
    place_order()
    place_order()
    assert store.generate_discount_code().startswith("DISCOUNT_6_")


def test_discount_amount_rounds_to_cents(store):
    assert store.discounts.discount_for(Decimal("33.33")) == Decimal("3.33")
    assert store.discounts.discount_for(Decimal("0.05")) == Decimal("0.01")


def test_one_redemption_per_slot_under_threads(store, place_order):
    place_order()
    place_order()
    code = store.generate_discount_code()
    sessions = [f"racer-{i}" for i in range(8)]
    for sid in sessions:
        store.add_to_cart(sid, "A", 1)

    results = []
    barrier = threading.Barrier(len(sessions))

    def race(sid):
        barrier.wait()
        try:
            results.append(store.checkout(sid, discount_code=code))
        except BusinessRuleViolation as e:
            results.append(e)

    threads = [threading.Thread(target=race, args=(sid,)) for sid in sessions]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    discounted = [r for r in results if not isinstance(r, Exception)]
    assert len(discounted) == 1
    assert discounted[0].discount.code == code
    assert store.orders.count() == 3
