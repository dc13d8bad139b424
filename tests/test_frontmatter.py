from agent_rig.templates.frontmatter import split_front_matter


def test_split_front_matter():
    split = split_front_matter("---\nid: foo\nversion: 2\n---\n## claude_md\nA")
    assert split.metadata_text == "id: foo\nversion: 2"
    assert split.body == "## claude_md\nA"


def test_no_front_matter_keeps_text():
    text = "## claude_md\nA\n---\nB"
    split = split_front_matter(text)
    assert split.metadata_text == ""
    assert split.body == text


def test_unterminated_front_matter_keeps_text():
    text = "---\nid: foo\n## claude_md\nA"
    split = split_front_matter(text)
    assert split.metadata_text == ""
    assert split.body == text


def test_delimiters_tolerate_surrounding_whitespace():
    split = split_front_matter("---  \nid: foo\n --- \nbody")
    assert split.metadata_text == "id: foo"
    assert split.body == "body"


def test_empty_front_matter_and_body():
    split = split_front_matter("---\n---")
    assert split.metadata_text == ""
    assert split.body == ""


def test_lone_delimiter_is_not_front_matter():
    for text in ("---", "---\n", "---\nid: foo\n"):
        split = split_front_matter(text)
        assert split.metadata_text == ""
        assert split.body == text
