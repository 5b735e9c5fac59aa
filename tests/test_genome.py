import dataclasses

import pytest

from genocoord.models.genome import GenomicRange, InvalidArguments, SeqId


### SeqId ordering

def test_seqid_numeric_ordering():
    assert SeqId("2") < SeqId("10")
    assert SeqId("10") > SeqId("2")


def test_seqid_lexicographic_ordering():
    assert SeqId("chr2") > SeqId("chr10")
    assert SeqId("chr10") < SeqId("chr2")


def test_seqid_mixed_falls_back_to_strings():
    # only one side is numeric
    assert SeqId("10") < SeqId("X")
    assert SeqId("2") < SeqId("MT")


def test_seqid_overflow_falls_back_to_strings():
    # 10000000000 does not fit in 32 bits, so "9" sorts after it
    assert SeqId("10000000000") < SeqId("9")
    assert SeqId("4294967295") > SeqId("9")


def test_seqid_plus_sign_is_numeric():
    assert SeqId("+12") > SeqId("5")


def test_seqid_equality_and_hash():
    assert SeqId("chr1") == SeqId("chr1")
    assert SeqId("chr1") != SeqId("Chr1")
    assert not SeqId("chr1") < SeqId("chr1")
    assert len({SeqId("chr1"), SeqId("chr1"), SeqId("chr2")}) == 2


def test_seqid_sorting():
    ids = [SeqId(name) for name in ["X", "10", "2", "1"]]
    assert [s.as_str() for s in sorted(ids)] == ["1", "2", "10", "X"]


def test_seqid_str():
    assert str(SeqId("scaffold_7")) == "scaffold_7"


### GenomicRange construction

@pytest.mark.parametrize("start,end", [(1, 1), (1, 10), (100, 200), (5, 5_000_000_000)])
def test_1closed_roundtrip(start, end):
    grange = GenomicRange.from_1closed("chr1", (start, end))
    assert grange.range_1closed() == (start, end)
    assert grange.range_0halfopen() == (start - 1, end)


@pytest.mark.parametrize("start,end", [(0, 0), (0, 10), (99, 200)])
def test_0halfopen_roundtrip(start, end):
    grange = GenomicRange.from_0halfopen("chr1", (start, end))
    assert grange.range_0halfopen() == (start, end)


def test_0halfopen_accepts_python_range():
    grange = GenomicRange.from_0halfopen(SeqId("chr1"), range(10, 20))
    assert grange.range_0halfopen() == (10, 20)
    assert grange.seqid == SeqId("chr1")


def test_0halfopen_does_not_check_bounds():
    grange = GenomicRange.from_0halfopen("chr1", (20, 10))
    assert grange.range_0halfopen() == (20, 10)


@pytest.mark.parametrize("end", [0, 1, 100])
def test_1closed_rejects_zero_start(end):
    with pytest.raises(InvalidArguments):
        GenomicRange.from_1closed("chr1", (0, end))


def test_0closed_view():
    grange = GenomicRange.from_0halfopen("chr1", (99, 200))
    assert grange.range_0closed() == (99, 199)


@pytest.mark.parametrize("start,end", [(10, 10), (20, 10)])
def test_0closed_view_of_empty_range_fails(start, end):
    grange = GenomicRange.from_0halfopen("chr1", (start, end))
    with pytest.raises(InvalidArguments):
        grange.range_0closed()


def test_length_and_str():
    grange = GenomicRange.from_1closed("chr1", (100, 200))
    assert grange.length == 101
    assert str(grange) == "chr1:100-200"


def test_range_is_immutable():
    grange = GenomicRange.from_0halfopen("chr1", (1, 2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        grange.start = 5


### combine

def test_combine_overlapping():
    a = GenomicRange.from_0halfopen("seq1", (5, 10))
    b = GenomicRange.from_0halfopen("seq1", (8, 20))
    assert a.combine(b) == GenomicRange.from_0halfopen("seq1", (5, 20))
    assert b.combine(a) == GenomicRange.from_0halfopen("seq1", (5, 20))


def test_bounding_union_covers_gap():
    a = GenomicRange.from_0halfopen("seq1", (5, 10))
    b = GenomicRange.from_0halfopen("seq1", (50, 60))
    assert a.bounding_union(b).range_0halfopen() == (5, 60)


def test_combine_different_seqids_fails():
    a = GenomicRange.from_0halfopen("seq1", (5, 10))
    b = GenomicRange.from_0halfopen("seq2", (8, 20))
    with pytest.raises(InvalidArguments, match="same seqid"):
        a.combine(b)


### ordering

def test_range_ordering():
    ranges = [
        GenomicRange.from_0halfopen("10", (0, 5)),
        GenomicRange.from_0halfopen("2", (10, 30)),
        GenomicRange.from_0halfopen("2", (10, 20)),
        GenomicRange.from_0halfopen("2", (5, 50)),
    ]
    assert [(str(r.seqid), r.start, r.end) for r in sorted(ranges)] == [
        ("2", 5, 50),
        ("2", 10, 20),
        ("2", 10, 30),
        ("10", 0, 5),
    ]


### locus parsing

def test_locus_parsing():
    grange = GenomicRange.from_locus("chr1:100-200")
    assert grange.seqid == SeqId("chr1")
    assert grange.range_0halfopen() == (99, 200)
    assert grange.range_1closed() == (100, 200)


@pytest.mark.parametrize("locus", [
    "chr1:100",
    "chr1:abc-200",
    "chr1:100-",
    "chr1:-5-10",
    "chr1:1-2-3",
    "chr1:2:1-5",
    "chr1",
    "",
])
def test_locus_parsing_fails(locus):
    with pytest.raises(InvalidArguments, match="<seqid>:<start>-<end>"):
        GenomicRange.from_locus(locus)


def test_locus_zero_start_fails():
    with pytest.raises(InvalidArguments, match="can't start with 0"):
        GenomicRange.from_locus("chr1:0-200")


def test_locus_roundtrips_through_str():
    assert str(GenomicRange.from_locus("scaffold_1:7-7")) == "scaffold_1:7-7"


def test_invalid_arguments_message():
    err = InvalidArguments("bad input")
    assert isinstance(err, ValueError)
    assert err.message == "bad input"
    assert str(err) == "invalid arguments: bad input"


def test_seqid_same_number_different_text():
    # neither orders before the other, but they are not equal
    assert not SeqId("02") < SeqId("2")
    assert not SeqId("2") < SeqId("02")
    assert SeqId("02") != SeqId("2")
    assert SeqId("02") >= SeqId("2") and SeqId("2") >= SeqId("02")


@pytest.mark.parametrize("first,second", [("02", "2"), ("+5", "5")])
def test_range_ordering_falls_through_to_coordinates(first, second):
    a = GenomicRange.from_0halfopen(first, (5, 10))
    b = GenomicRange.from_0halfopen(second, (1, 2))
    assert b < a
    assert not a < b
    assert sorted([a, b]) == sorted([b, a]) == [b, a]


def test_range_ordering_with_other_types():
    with pytest.raises(TypeError):
        GenomicRange.from_0halfopen("chr1", (1, 2)) < (1, 2)


@pytest.mark.parametrize("bounds", [(-1, 5), (1, -5)])
def test_1closed_rejects_negative_bounds(bounds):
    with pytest.raises(InvalidArguments, match="negative"):
        GenomicRange.from_1closed("chr1", bounds)


@pytest.mark.parametrize("bounds", [(-1, 5), (0, -5), range(-3, 2)])
def test_0halfopen_rejects_negative_bounds(bounds):
    with pytest.raises(InvalidArguments, match="negative"):
        GenomicRange.from_0halfopen("chr1", bounds)


@pytest.mark.parametrize("bounds", [(1.5, 5), (1, "5"), (True, 5)])
def test_constructors_reject_non_integer_bounds(bounds):
    with pytest.raises(InvalidArguments, match="integers"):
        GenomicRange.from_0halfopen("chr1", bounds)
    with pytest.raises(InvalidArguments, match="integers"):
        GenomicRange.from_1closed("chr1", bounds)
