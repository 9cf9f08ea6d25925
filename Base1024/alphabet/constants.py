ALPHABET_SIZE = 1024
BITS_PER_SYMBOL = 10
CHUNK_SIZE = 5
GROUP_SIZE = 4
RESIDUAL_SHIFT = 8

SHORT_PAD_COUNT = 4
SENTINEL_COUNT = SHORT_PAD_COUNT + 1

# PAD_1..PAD_3 are cut out of a listing at these positions, each index taken
# after the previous removal.
SHORT_PAD_POSITIONS = (256, 512, 768)
LISTING_SIZE = ALPHABET_SIZE + len(SHORT_PAD_POSITIONS)

DEFAULT_PAD_FULL = 0x4E00
DEFAULT_PAD_0 = 0x4E01
DEFAULT_LISTING_START = 0x4E02
DEFAULT_LISTING = range(DEFAULT_LISTING_START, DEFAULT_LISTING_START + LISTING_SIZE)

# Sentinels used for listings loaded from a file when none are given.
LISTING_PAD_FULL = 0x2615
LISTING_PAD_0 = 0x269C
