import pytest

from Base1024.alphabet import DEFAULT_ALPHABET, set_alphabet


@pytest.fixture(autouse=True)
def _restore_alphabet():
    yield
    set_alphabet(None)


@pytest.fixture
def alphabet():
    return DEFAULT_ALPHABET


@pytest.fixture
def symbols(alphabet):
    """Builds a symbol string from alphabet values and sentinel names."""
    sentinels = {
        "PAD": alphabet.pad_full,
        "PAD_0": alphabet.short_pads[0],
        "PAD_1": alphabet.short_pads[1],
        "PAD_2": alphabet.short_pads[2],
        "PAD_3": alphabet.short_pads[3],
    }

    def build(*items):
        return "".join(
            sentinels[item] if isinstance(item, str) else alphabet.forward(item)
            for item in items
        )

    return build
