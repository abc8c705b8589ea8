from decimal import Decimal

import pytest

from ve_dist.domain.errors import EntityNotFoundError
from ve_dist.domain.models import Distributor, UserRewardHistoryRecord

from .fakes import CONTROLLER, DIST, REWARD_TOKEN, VE


def make_distributor():
    return Distributor(id=DIST, ve=VE, controller=CONTROLLER, reward_token=REWARD_TOKEN, decimals=18)


def test_loaded_entity_is_a_copy(store):
    store.save(make_distributor())

    loaded = store.load(Distributor, DIST)
    loaded.revision = 9
    loaded.implementations.append("0x01")

    fresh = store.load(Distributor, DIST)
    assert fresh.revision == 0
    assert fresh.implementations == []

    store.save(loaded)
    assert store.load(Distributor, DIST).revision == 9


def test_require_missing_entity_raises(store):
    assert store.load(Distributor, DIST) is None

    with pytest.raises(EntityNotFoundError) as exc_info:
        store.require(Distributor, DIST)

    assert exc_info.value.entity_type == "Distributor"
    assert exc_info.value.entity_id == DIST


def test_create_is_insert_if_absent(store):
    first = UserRewardHistoryRecord(
        id="u_1", ve_user="u", time=1, claimed=Decimal('1'),
        claimed_usd=Decimal('2'), locked_amount_usd=Decimal('3'), apr=Decimal('4'),
    )
    second = UserRewardHistoryRecord(
        id="u_1", ve_user="u", time=1, claimed=Decimal('10'),
        claimed_usd=Decimal('20'), locked_amount_usd=Decimal('30'), apr=Decimal('40'),
    )

    assert store.create(first) is True
    assert store.create(second) is False
    assert store.load(UserRewardHistoryRecord, "u_1") == first
    assert len(store.all(UserRewardHistoryRecord)) == 1


def test_snapshot_serializes_decimals_as_strings(store):
    distributor = make_distributor()
    distributor.apr = Decimal('12.5')
    store.save(distributor)

    snapshot = store.snapshot()

    assert snapshot["Distributor"][DIST]["apr"] == "12.5"
    assert snapshot["Distributor"][DIST]["implementations"] == []


def test_transaction_rolls_back_on_error(store):
    store.save(make_distributor())

    with pytest.raises(RuntimeError):
        with store.transaction():
            distributor = store.require(Distributor, DIST)
            distributor.revision = 3
            store.save(distributor)
            store.create(UserRewardHistoryRecord(
                id="u_1", ve_user="u", time=1, claimed=Decimal('1'),
                claimed_usd=Decimal('1'), locked_amount_usd=Decimal('1'), apr=Decimal('1'),
            ))
            raise RuntimeError("boom")

    assert store.require(Distributor, DIST).revision == 0
    assert store.all(UserRewardHistoryRecord) == []


def test_transaction_commits_on_success(store):
    with store.transaction():
        store.save(make_distributor())

    assert store.load(Distributor, DIST) is not None

    # 提交后可以开始新的事务
    with store.transaction():
        pass
