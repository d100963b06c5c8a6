import pytest

from utf8_builder.builder.builder import Utf8Builder

TEXT_MIXED = "This is English. And 這是中文。This is number, 123."
TEXT_KANA = "あれは えんびつですか"
TEXT_EMOJI = "😀 😃 😄 😁 😆 😅 😂 🤣 😇 😉 😊 🙂 🙃"
TEXT_EDGES = "\u0000\u007f\u0080\u07ff\u0800\ud7ff\ue000\uffff\U00010000\U0010ffff"

SAMPLE_TEXTS = [TEXT_MIXED, TEXT_KANA, TEXT_EMOJI, TEXT_EDGES]


@pytest.fixture()
def builder() -> Utf8Builder:
    return Utf8Builder()


@pytest.fixture(params=SAMPLE_TEXTS, ids=["mixed", "kana", "emoji", "edges"])
def sample_text(request: pytest.FixtureRequest) -> str:
    """Valid text covering 1- to 4-byte sequences."""
    return request.param
