import random

import pytest

from colltools.structs import maps
from colltools.structs.configuration import OrderingSettings, Settings, configured

MAPPING = {str(i): i for i in range(50)}


def test_native_order_when_not_shuffled():
    with configured(Settings(ordering=OrderingSettings(shuffle=False))):
        assert maps.keys(MAPPING) == list(MAPPING)
        assert maps.values(MAPPING) == list(MAPPING.values())
        assert maps.pick(MAPPING) == ('0', 0)


def test_shuffled_order_is_reproducible_with_a_seed():
    with configured(Settings(ordering=OrderingSettings(seed=123))):
        keys1 = maps.keys(MAPPING)
        keys2 = maps.keys(MAPPING)
    assert keys1 == keys2
    assert sorted(keys1) == sorted(MAPPING)


def test_shuffled_order_follows_the_seed():
    expected = list(MAPPING)
    random.Random(123).shuffle(expected)
    with configured(Settings(ordering=OrderingSettings(seed=123))):
        assert maps.keys(MAPPING) == expected


def test_shuffling_uses_a_random_generator(mocker):
    shuffle = mocker.patch.object(random.Random, 'shuffle')
    with configured(Settings(ordering=OrderingSettings(shuffle=True))):
        maps.keys(MAPPING)
    assert shuffle.call_count == 1


@pytest.mark.parametrize('m', [
    pytest.param({}, id='empty'),
    pytest.param({'a': 1}, id='single'),
])
def test_tiny_mappings_are_not_shuffled(mocker, m):
    shuffle = mocker.patch.object(random.Random, 'shuffle')
    with configured(Settings(ordering=OrderingSettings(shuffle=True))):
        maps.keys(m)
    assert not shuffle.called


def test_unseeded_shuffling_varies():
    # 50! orderings: the chance of 10 identical shuffles in a row is negligible.
    with configured(Settings(ordering=OrderingSettings(shuffle=True))):
        orders = {tuple(maps.keys(MAPPING)) for _ in range(10)}
    assert len(orders) > 1


def test_picking_does_not_shuffle_the_whole_mapping(mocker):
    shuffle = mocker.patch.object(random.Random, 'shuffle')
    with configured(Settings(ordering=OrderingSettings(shuffle=True))):
        key, value = maps.pick(MAPPING)
    assert not shuffle.called
    assert MAPPING[key] == value


def test_picking_follows_the_seed():
    index = random.Random(123).randrange(len(MAPPING))
    with configured(Settings(ordering=OrderingSettings(seed=123))):
        assert maps.pick(MAPPING) == list(MAPPING.items())[index]


def test_picking_varies_when_unseeded():
    with configured(Settings(ordering=OrderingSettings(shuffle=True))):
        picks = {maps.pick(MAPPING) for _ in range(20)}
    assert len(picks) > 1
