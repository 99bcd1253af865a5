from description_sync.summary.description import has_summary, merge_summary


def test_merge_into_empty_description() -> None:
    assert merge_summary("", "2X:\n- 400m @ Z4 (170)") == "---Workout Summary---\n2X:\n- 400m @ Z4 (170)"
    assert merge_summary(None, "10:00min @ Z1 ()") == "---Workout Summary---\n10:00min @ Z1 ()"


def test_merge_keeps_existing_text() -> None:
    merged = merge_summary("Windy morning", "1km @ Z4 (162)")
    assert merged == "Windy morning\n---Workout Summary---\n1km @ Z4 (162)"
    assert has_summary(merged)


def test_custom_separator() -> None:
    merged = merge_summary("Felt good", "1km @ Z4 (162)", separator="== Plan ==")
    assert merged.splitlines()[1] == "== Plan =="
    assert has_summary(merged, "== Plan ==")
    assert not has_summary(merged)


def test_has_summary_on_empty() -> None:
    assert not has_summary("")
    assert not has_summary(None)
