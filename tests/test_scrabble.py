import pytest

from mathpuzzles.scrabble import (
    CountedTile,
    OutputFormat,
    ScrabbleParameters,
    SolutionCount,
    SolutionList,
    Tile,
    count_hands,
    hand_score,
    list_hands,
    scrabble,
)

EXPECTED_46 = [
    "AFKJXQZ", "AHKJXQZ", "AVKJXQZ", "AWKJXQZ", "AYKJXQZ", "BBFJXQZ", "BBHJXQZ",
    "BBVJXQZ", "BBWJXQZ", "BBYJXQZ", "BCFJXQZ", "BCHJXQZ", "BCVJXQZ", "BCWJXQZ",
    "BCYJXQZ", "BMFJXQZ", "BMHJXQZ", "BMVJXQZ", "BMWJXQZ", "BMYJXQZ", "BPFJXQZ",
    "BPHJXQZ", "BPVJXQZ", "BPWJXQZ", "BPYJXQZ", "CCFJXQZ", "CCHJXQZ", "CCVJXQZ",
    "CCWJXQZ", "CCYJXQZ", "CMFJXQZ", "CMHJXQZ", "CMVJXQZ", "CMWJXQZ", "CMYJXQZ",
    "CPFJXQZ", "CPHJXQZ", "CPVJXQZ", "CPWJXQZ", "CPYJXQZ", "DBKJXQZ", "DCKJXQZ",
    "DFFJXQZ", "DFHJXQZ", "DFVJXQZ", "DFWJXQZ", "DFYJXQZ", "DHHJXQZ", "DHVJXQZ",
    "DHWJXQZ", "DHYJXQZ", "DMKJXQZ", "DPKJXQZ", "DVVJXQZ", "DVWJXQZ", "DVYJXQZ",
    "DWWJXQZ", "DWYJXQZ", "DYYJXQZ", "EFKJXQZ", "EHKJXQZ", "EVKJXQZ", "EWKJXQZ",
    "EYKJXQZ", "GBKJXQZ", "GCKJXQZ", "GFFJXQZ", "GFHJXQZ", "GFVJXQZ", "GFWJXQZ",
    "GFYJXQZ", "GHHJXQZ", "GHVJXQZ", "GHWJXQZ", "GHYJXQZ", "GMKJXQZ", "GPKJXQZ",
    "GVVJXQZ", "GVWJXQZ", "GVYJXQZ", "GWWJXQZ", "GWYJXQZ", "GYYJXQZ", "IFKJXQZ",
    "IHKJXQZ", "IVKJXQZ", "IWKJXQZ", "IYKJXQZ", "LFKJXQZ", "LHKJXQZ", "LVKJXQZ",
    "LWKJXQZ", "LYKJXQZ", "MMFJXQZ", "MMHJXQZ", "MMVJXQZ", "MMWJXQZ", "MMYJXQZ",
    "MPFJXQZ", "MPHJXQZ", "MPVJXQZ", "MPWJXQZ", "MPYJXQZ", "NFKJXQZ", "NHKJXQZ",
    "NVKJXQZ", "NWKJXQZ", "NYKJXQZ", "OFKJXQZ", "OHKJXQZ", "OVKJXQZ", "OWKJXQZ",
    "OYKJXQZ", "PPFJXQZ", "PPHJXQZ", "PPVJXQZ", "PPWJXQZ", "PPYJXQZ", "RFKJXQZ",
    "RHKJXQZ", "RVKJXQZ", "RWKJXQZ", "RYKJXQZ", "SFKJXQZ", "SHKJXQZ", "SVKJXQZ",
    "SWKJXQZ", "SYKJXQZ", "TFKJXQZ", "THKJXQZ", "TVKJXQZ", "TWKJXQZ", "TYKJXQZ",
    "UFKJXQZ", "UHKJXQZ", "UVKJXQZ", "UWKJXQZ", "UYKJXQZ",
]


def test_count_for_seven_tiles_scoring_46():
    assert scrabble(ScrabbleParameters()) == SolutionCount(138)
    assert count_hands(7, 46) == 138


def test_list_for_seven_tiles_scoring_46():
    result = scrabble(ScrabbleParameters(output=OutputFormat.LIST))
    assert result == SolutionList(EXPECTED_46)


def test_listed_hands_are_valid():
    hands = list_hands(7, 46)
    assert len(hands) == 138
    assert len(set(hands)) == 138
    assert hands == sorted(hands)
    for hand in hands:
        assert len(hand) == 7
        assert hand_score(hand) == 46


def test_repeated_calls_are_identical():
    first = list_hands(6, 30)
    second = list_hands(6, 30)
    assert first == second
    assert str(scrabble(ScrabbleParameters(6, 30, OutputFormat.LIST))) == "\n".join(first)


@pytest.mark.parametrize("hand_size", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("target_score", [0, 1, 4, 7, 10, 18, 25, 40])
def test_count_matches_list(hand_size, target_score):
    hands = list_hands(hand_size, target_score)
    assert count_hands(hand_size, target_score) == len(hands)
    assert hands == sorted(set(hands))


def test_empty_hand():
    assert count_hands(0, 0) == 1
    assert list_hands(0, 0) == [""]
    assert count_hands(0, 1) == 0
    assert list_hands(0, 1) == []


def test_small_hands():
    assert list_hands(1, 10) == ["Q", "Z"]
    assert list_hands(1, 0) == [" "]
    assert list_hands(2, 0) == ["  "]
    assert list_hands(3, 0) == []
    assert list_hands(2, 18) == ["JQ", "JZ", "XQ", "XZ"]
    assert list_hands(2, 20) == ["QZ"]


def test_highest_scores():
    # Q, Z, J, X and K, plus two tiles worth 4.
    assert count_hands(7, 49) == 15
    assert count_hands(7, 50) == 0
    assert count_hands(7, 1000) == 0


def test_hand_larger_than_bag():
    catalog = (
        CountedTile(Tile("A", 1), 2),
        CountedTile(Tile("B", 3), 1),
    )
    assert scrabble(ScrabbleParameters(3, 5), catalog) == SolutionCount(1)
    assert scrabble(ScrabbleParameters(4, 5), catalog) == SolutionCount(0)
    assert scrabble(ScrabbleParameters(3, 5, OutputFormat.LIST), catalog) == SolutionList(["AAB"])


@pytest.mark.parametrize(
    "kwargs",
    [
        {"hand_size": -1},
        {"target_score": -5},
        {"hand_size": 2**32},
        {"hand_size": "7"},
        {"target_score": 4.5},
        {"hand_size": True},
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        ScrabbleParameters(**kwargs)


def test_output_given_as_text():
    assert ScrabbleParameters(output="List").output is OutputFormat.LIST
    with pytest.raises(ValueError):
        ScrabbleParameters(output="table")
