"""
牌组存储的单元测试.

测试save/load/load_result以及DeckSerializer.
"""

import pytest

from cards.core.deck import create_deck, shuffle
from cards.core.exceptions import DeckDeserializationError, DeckSerializationError
from cards.core.storage import (
    CORRUPT_DECK_FILE, FILE_NOT_FOUND_MESSAGE, FILE_NOT_READABLE,
    DeckSerializer, load, load_result, save,
)


@pytest.mark.unit
@pytest.mark.fast
class TestSaveAndLoad:
    """save和load的单元测试."""

    def test_round_trip(self, fresh_deck, deck_file):
        """测试保存后读取得到相同牌组."""
        save(fresh_deck, deck_file)
        assert load(deck_file) == fresh_deck

    def test_round_trip_shuffled(self, fresh_deck, seeded_rng, deck_file):
        """测试洗过的牌组顺序也能保留."""
        shuffled = shuffle(fresh_deck, seeded_rng)
        save(shuffled, deck_file)
        assert load(deck_file) == shuffled

    def test_round_trip_empty_deck(self, deck_file):
        """测试空牌组."""
        save([], deck_file)
        assert load(deck_file) == []

    def test_round_trip_arbitrary_strings(self, deck_file):
        """测试任意字符串都能无损保存."""
        deck = ["红桃A", "", "That file does not exist", "a\nb"]
        save(deck, deck_file)
        assert load(deck_file) == deck

    def test_save_overwrites(self, fresh_deck, deck_file):
        """测试保存会覆盖已有内容."""
        save(fresh_deck, deck_file)
        save(fresh_deck[:2], deck_file)
        assert load(deck_file) == fresh_deck[:2]

    def test_save_missing_parent_directory_raises(self, fresh_deck, tmp_path):
        """测试父目录不存在时抛出OSError."""
        with pytest.raises(OSError):
            save(fresh_deck, str(tmp_path / "missing" / "my_deck"))

    def test_save_to_directory_raises(self, fresh_deck, tmp_path):
        """测试路径是目录时抛出OSError."""
        with pytest.raises(OSError):
            save(fresh_deck, str(tmp_path))

    def test_load_missing_file(self, tmp_path):
        """测试文件不存在时返回提示字符串."""
        assert load(str(tmp_path / "nonexistent-path")) == "That file does not exist"
        assert FILE_NOT_FOUND_MESSAGE == "That file does not exist"

    def test_load_directory_collapses_to_message(self, tmp_path):
        """测试其他读取失败也返回同一提示字符串."""
        assert load(str(tmp_path)) == FILE_NOT_FOUND_MESSAGE

    def test_load_invalid_path_collapses_to_message(self):
        """测试路径含有NUL字节时也返回同一提示字符串."""
        assert load("bad\x00name") == FILE_NOT_FOUND_MESSAGE

    def test_load_corrupt_file_raises(self, deck_file):
        """测试文件内容损坏时抛出反序列化异常."""
        with open(deck_file, 'wb') as f:
            f.write(b'\x83h\x02not json')
        with pytest.raises(DeckDeserializationError):
            load(deck_file)


@pytest.mark.unit
@pytest.mark.fast
class TestLoadResult:
    """load_result的单元测试."""

    def test_load_result_success(self, fresh_deck, deck_file):
        """测试成功读取."""
        save(fresh_deck, deck_file)
        result = load_result(deck_file)
        assert result.success
        assert result.deck == fresh_deck
        assert result.error_code is None

    def test_load_result_missing_file(self, deck_file):
        """测试文件不存在."""
        result = load_result(deck_file)
        assert not result.success
        assert result.deck is None
        assert result.error_code == FILE_NOT_READABLE
        assert deck_file in result.message

    def test_load_result_invalid_path(self):
        """测试路径含有NUL字节时返回读取失败结果."""
        result = load_result("bad\x00name")
        assert not result.success
        assert result.deck is None
        assert result.error_code == FILE_NOT_READABLE

    def test_load_result_corrupt_file(self, deck_file):
        """测试文件内容损坏."""
        with open(deck_file, 'wb') as f:
            f.write(b'{"not": "a deck"}')
        result = load_result(deck_file)
        assert not result.success
        assert result.error_code == CORRUPT_DECK_FILE

    def test_load_result_distinguishes_sentinel_deck(self, deck_file):
        """测试内容恰好等于提示字符串的牌组也能被识别为成功."""
        save([FILE_NOT_FOUND_MESSAGE], deck_file)
        result = load_result(deck_file)
        assert result.success
        assert result.deck == [FILE_NOT_FOUND_MESSAGE]


@pytest.mark.unit
@pytest.mark.fast
class TestDeckSerializer:
    """DeckSerializer的单元测试."""

    def test_serialize_returns_bytes(self):
        """测试序列化结果为字节串."""
        blob = DeckSerializer.serialize(create_deck())
        assert isinstance(blob, bytes)
        assert DeckSerializer.deserialize(blob) == create_deck()

    def test_serialize_rejects_non_string(self):
        """测试非字符串元素."""
        with pytest.raises(DeckSerializationError):
            DeckSerializer.serialize(["Ace of Spades", 3])

    @pytest.mark.parametrize("blob", [
        b"",
        b"\xff\xfe",
        b"not json",
        b'"Ace of Spades"',
        b'["Ace of Spades", 1]',
        b'null',
    ])
    def test_deserialize_invalid(self, blob):
        """测试无效的字节串."""
        with pytest.raises(DeckDeserializationError):
            DeckSerializer.deserialize(blob)
