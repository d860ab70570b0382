"""
Property-based Tests for Deck Invariants - 牌组不变量属性测试

该模块使用hypothesis进行基于属性的测试，确保：
- 洗牌只改变顺序，不增删牌
- 分牌后手牌与剩余牌组依次拼接等于原牌组
- 查牌当且仅当牌是规范卡牌
- 保存后读取得到相同牌组
"""

import os
import random
import tempfile
from typing import List

import pytest
from hypothesis import given, strategies as st

from cards.core.deck import CANONICAL_CARDS, contains, create_deck, deal, shuffle
from cards.core.storage import load, save


# Hypothesis策略定义
seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)
deck_strategy = st.permutations(create_deck())
any_strings_strategy = st.lists(st.text(), max_size=30)


@pytest.mark.property_test
@given(deck_strategy, seed_strategy)
def test_shuffle_is_permutation_property(deck: List[str], seed: int):
    """Property test: 洗牌结果与输入包含相同的牌"""
    shuffled = shuffle(deck, random.Random(seed))

    assert len(shuffled) == len(deck)
    assert sorted(shuffled) == sorted(deck)


@pytest.mark.property_test
@given(any_strings_strategy, seed_strategy)
def test_shuffle_preserves_duplicates_property(deck: List[str], seed: int):
    """Property test: 任意含重复元素的序列洗牌后多重集合不变"""
    assert sorted(shuffle(deck, random.Random(seed))) == sorted(deck)


@pytest.mark.property_test
@given(deck_strategy, st.integers(min_value=0, max_value=20))
def test_deal_concatenation_property(deck: List[str], hand_size: int):
    """Property test: hand + rest == deck，且张数正确"""
    hand, rest = deal(deck, hand_size)

    assert len(hand) == hand_size
    assert len(rest) == len(deck) - hand_size
    assert hand + rest == deck


@pytest.mark.property_test
@given(deck_strategy, st.integers(min_value=21, max_value=1000))
def test_deal_clamps_property(deck: List[str], hand_size: int):
    """Property test: 手牌张数超过牌组时手牌为整副牌"""
    assert deal(deck, hand_size) == (deck, [])


@pytest.mark.property_test
@given(deck_strategy, st.text())
def test_contains_property(deck: List[str], card: str):
    """Property test: 查牌结果当且仅当是规范卡牌"""
    assert contains(deck, card) == (card in CANONICAL_CARDS)


@pytest.mark.property_test
@given(any_strings_strategy)
def test_save_load_round_trip_property(deck: List[str]):
    """Property test: 保存后读取得到相同牌组"""
    with tempfile.TemporaryDirectory() as tmp_dir:
        filename = os.path.join(tmp_dir, "deck")
        save(deck, filename)
        assert load(filename) == deck
