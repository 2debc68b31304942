from tweetsplit.formatting import number_chunks, strip_at_mentions, strip_numbering


def test_single_draft_is_not_numbered():
    assert number_chunks(["only"]) == ["only"]


def test_multiple_drafts_are_numbered():
    assert number_chunks(["a", "b", "c"]) == ["1/3 a", "2/3 b", "3/3 c"]


def test_drafts_are_trimmed_and_empty_ones_dropped():
    assert number_chunks(["  a ", "", "   "]) == ["a"]
    assert number_chunks([" a", "\n", "b "]) == ["1/2 a", "2/2 b"]


def test_no_drafts():
    assert number_chunks([]) == []


def test_strip_numbering():
    assert strip_numbering("3/12 hello") == "hello"
    assert strip_numbering("hello 1/2 there") == "hello 1/2 there"
    assert strip_numbering("no prefix") == "no prefix"


def test_strip_numbering_reverses_number_chunks():
    drafts = ["first", "second"]
    assert [strip_numbering(t) for t in number_chunks(drafts)] == drafts


def test_strip_at_mentions():
    assert strip_at_mentions("hey @alice and @bob_2!") == "hey alice and bob_2!"
    assert strip_at_mentions("@carol said hi") == "carol said hi"


def test_strip_at_mentions_keeps_email_addresses():
    assert strip_at_mentions("mail me at a@b.com") == "mail me at a@b.com"
