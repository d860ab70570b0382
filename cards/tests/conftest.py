"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture
- 测试标记注册

所有测试都会自动加载这些配置。
"""

import random
from typing import List

import pytest

from cards.core.deck import create_deck


@pytest.fixture
def fresh_deck() -> List[str]:
    """未洗的20张新牌"""
    return create_deck()


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(42)


@pytest.fixture
def deck_file(tmp_path):
    """临时目录中尚不存在的牌组文件路径"""
    return str(tmp_path / "my_deck")


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 标记单元测试"
    )
    config.addinivalue_line(
        "markers", "fast: 标记快速测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
