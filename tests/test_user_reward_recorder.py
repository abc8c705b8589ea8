from decimal import Decimal

from ve_dist.domain.models import User, UserRewardHistoryRecord
from ve_dist.services.apr_calculator import APRCalculator
from ve_dist.services.implementations import UserRewardRecorder

from .fakes import E18, USER_ID


def test_first_claim_updates_user_and_history(injector, seeded):
    recorder = injector.get(UserRewardRecorder)
    user = seeded.require(User, USER_ID)

    history = recorder.record_claim(user, 5 * E18, Decimal('2'), 1_000_000, decimals=18)

    saved = seeded.require(User, USER_ID)
    expected_apr = APRCalculator.calculate(0, 1_000_000, Decimal('10'), Decimal('500'))
    assert saved.ve_dist_rewards_total == Decimal('5')
    assert saved.ve_dist_last_claim == 1_000_000
    assert saved.ve_dist_last_apr == expected_apr

    assert history.id == f"{USER_ID}_1000000"
    assert history.ve_user == USER_ID
    assert history.claimed == Decimal('5')
    assert history.claimed_usd == Decimal('10')
    assert history.locked_amount_usd == Decimal('500')
    assert history.apr == expected_apr
    assert seeded.require(UserRewardHistoryRecord, history.id) == history


def test_apr_covers_interval_since_previous_claim(injector, seeded):
    recorder = injector.get(UserRewardRecorder)
    recorder.record_claim(seeded.require(User, USER_ID), E18, Decimal('1'), 1_000_000, decimals=18)

    history = recorder.record_claim(seeded.require(User, USER_ID), 3 * E18, Decimal('1'), 1_086_400, decimals=18)

    expected_apr = APRCalculator.calculate(1_000_000, 1_086_400, Decimal('3'), Decimal('500'))
    saved = seeded.require(User, USER_ID)
    assert saved.ve_dist_rewards_total == Decimal('4')
    assert saved.ve_dist_last_apr == expected_apr
    assert history.apr == expected_apr


def test_distinct_timestamps_create_distinct_records(injector, seeded):
    recorder = injector.get(UserRewardRecorder)

    recorder.record_claim(seeded.require(User, USER_ID), E18, Decimal('1'), 1_000_000, decimals=18)
    recorder.record_claim(seeded.require(User, USER_ID), E18, Decimal('1'), 1_000_001, decimals=18)

    ids = sorted(r.id for r in seeded.all(UserRewardHistoryRecord))
    assert ids == [f"{USER_ID}_1000000", f"{USER_ID}_1000001"]


def test_colliding_timestamp_keeps_original_record(injector, seeded):
    recorder = injector.get(UserRewardRecorder)
    original = recorder.record_claim(seeded.require(User, USER_ID), E18, Decimal('1'), 1_000_000, decimals=18)

    duplicate = recorder.record_claim(seeded.require(User, USER_ID), 9 * E18, Decimal('3'), 1_000_000, decimals=18)

    assert duplicate is None
    records = seeded.all(UserRewardHistoryRecord)
    assert records == [original]
    assert records[0].claimed == Decimal('1')


def test_zero_locked_value_gives_zero_apr(injector, store):
    store.save(User(id=USER_ID))
    recorder = injector.get(UserRewardRecorder)

    history = recorder.record_claim(store.require(User, USER_ID), E18, Decimal('1'), 1_000_000, decimals=18)

    assert history.apr == Decimal('0')
    assert store.require(User, USER_ID).ve_dist_rewards_total == Decimal('1')


def test_token_decimals_are_applied(injector, store):
    store.save(User(id=USER_ID, locked_amount_usd=Decimal('100')))
    recorder = injector.get(UserRewardRecorder)

    history = recorder.record_claim(store.require(User, USER_ID), 1_500_000, Decimal('1'), 10, decimals=6)

    assert history.claimed == Decimal('1.5')
