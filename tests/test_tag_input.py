"""
Tests for the tag_input module

Run: pytest tests/test_tag_input.py -v
Or demo: python tests/test_tag_input.py
"""


def _make_controller(tags=()):
    """Controller plus a record of every on_change call"""
    from symptom_smart.tag_input import TagInputController

    calls = []
    controller = TagInputController(tags=tags, on_change=calls.append)
    return controller, calls


def test_normalizes_before_adding():
    """Mixed case and whitespace never reach the list"""
    from symptom_smart.tag_input import SubmitOutcome

    controller, calls = _make_controller()

    assert controller.submit("Fever ") == SubmitOutcome.ADDED_KNOWN
    assert controller.tags == ["fever"]
    assert calls == [["fever"]]
    assert controller.buffer == ""


def test_empty_token_is_ignored():
    from symptom_smart.tag_input import SubmitOutcome, TagInputState

    controller, calls = _make_controller()

    assert controller.submit("   ") == SubmitOutcome.IGNORED
    assert controller.tags == []
    assert calls == []
    assert controller.state == TagInputState.IDLE


def test_duplicate_leaves_list_unchanged():
    from symptom_smart.tag_input import SubmitOutcome

    controller, calls = _make_controller(tags=["fever"])

    controller.set_buffer("FEVER")
    assert controller.submit() == SubmitOutcome.DUPLICATE
    assert controller.tags == ["fever"]
    assert controller.buffer == ""
    assert calls == []


def test_unknown_symptom_added_as_typed():
    from symptom_smart.tag_input import SubmitOutcome

    controller, _ = _make_controller()

    assert controller.submit("Hiccups") == SubmitOutcome.ADDED_UNKNOWN
    assert controller.tags == ["hiccups"]


def test_suggestion_accept():
    """feve -> fever when accepted"""
    from symptom_smart.tag_input import SubmitOutcome, TagInputState

    controller, calls = _make_controller()

    assert controller.submit("feve") == SubmitOutcome.SUGGESTED
    assert controller.state == TagInputState.AWAITING_CONFIRMATION
    assert controller.pending_suggestion.suggested == "fever"
    assert controller.pending_suggestion.original == "feve"
    assert controller.buffer == "feve"
    assert controller.tags == []
    assert calls == []

    assert controller.accept_suggestion() is True
    assert controller.tags == ["fever"]
    assert controller.state == TagInputState.IDLE
    assert controller.pending_suggestion is None
    assert controller.buffer == ""

    print(f"✓ Accepted suggestion: {controller.tags}")


def test_suggestion_keep_original():
    """feve stays feve when kept"""
    from symptom_smart.tag_input import TagInputState

    controller, calls = _make_controller()

    controller.submit("Feve")
    assert controller.keep_original() is True
    assert controller.tags == ["feve"]
    assert calls == [["feve"]]
    assert controller.state == TagInputState.IDLE


def test_resolution_rechecks_membership():
    """Accepting a term already present does not duplicate it"""
    controller, calls = _make_controller()

    controller.submit("feve")
    controller.sync_tags(["fever"])
    # sync_tags drops the pending suggestion
    assert controller.accept_suggestion() is False

    controller.submit("feve")
    assert controller.pending_suggestion.suggested == "fever"
    assert controller.accept_suggestion() is True
    assert controller.tags == ["fever"]
    assert calls == []


def test_resolve_without_pending_is_noop():
    controller, calls = _make_controller()

    assert controller.accept_suggestion() is False
    assert controller.keep_original() is False
    assert controller.tags == []
    assert calls == []


def test_resubmit_replaces_pending_suggestion():
    from symptom_smart.tag_input import SubmitOutcome, TagInputState

    controller, _ = _make_controller()

    controller.submit("feve")
    assert controller.submit("coughh") == SubmitOutcome.SUGGESTED
    assert controller.pending_suggestion.suggested == "cough"

    assert controller.submit("rash") == SubmitOutcome.ADDED_KNOWN
    assert controller.state == TagInputState.IDLE
    assert controller.tags == ["rash"]


def test_remove():
    """Removing drops every occurrence; absent tags change nothing"""
    controller, calls = _make_controller(tags=["fever", "cough"])

    controller.remove("rash")
    assert controller.tags == ["fever", "cough"]
    assert calls == []

    controller.remove("fever")
    assert controller.tags == ["cough"]
    assert calls == [["cough"]]


def test_remove_works_while_awaiting_confirmation():
    from symptom_smart.tag_input import TagInputState

    controller, _ = _make_controller(tags=["cough"])

    controller.submit("feve")
    controller.remove("cough")
    assert controller.tags == []
    assert controller.state == TagInputState.AWAITING_CONFIRMATION


def test_key_and_blur_events():
    """Enter and comma submit, other keys do not"""
    from symptom_smart.tag_input import SubmitOutcome

    controller, _ = _make_controller()

    controller.set_buffer("cough")
    assert controller.handle_key("a") is False
    assert controller.tags == []

    assert controller.handle_key("Enter") is True
    assert controller.tags == ["cough"]

    controller.set_buffer("rash")
    assert controller.handle_key(",") is True
    assert controller.tags == ["cough", "rash"]

    controller.set_buffer("chills")
    assert controller.blur() == SubmitOutcome.ADDED_KNOWN
    assert controller.tags == ["cough", "rash", "chills"]


def test_callback_gets_a_copy():
    controller, calls = _make_controller()

    controller.submit("fever")
    calls[0].append("mutated")
    assert controller.tags == ["fever"]


def test_initial_tags_are_normalized():
    controller, _ = _make_controller(tags=[" Fever", "fever", "", "COUGH"])
    assert controller.tags == ["fever", "cough"]


def test_full_scenario():
    """fever, headahe -> headache, fever again"""
    from symptom_smart.tag_input import SubmitOutcome

    controller, calls = _make_controller()

    controller.submit("fever")
    assert controller.tags == ["fever"]

    assert controller.submit("headahe") == SubmitOutcome.SUGGESTED
    assert controller.pending_suggestion.suggested == "headache"

    controller.accept_suggestion()
    assert controller.tags == ["fever", "headache"]

    assert controller.submit("fever") == SubmitOutcome.DUPLICATE
    assert controller.tags == ["fever", "headache"]
    assert calls[-1] == ["fever", "headache"]

    print(f"✓ Scenario: {controller.tags}")


def demo():
    print("=" * 60)
    print("Symptom Smart: Tag input tests")
    print("=" * 60)

    test_normalizes_before_adding()
    test_suggestion_accept()
    test_suggestion_keep_original()
    test_remove()
    test_full_scenario()

    print("=" * 60)
    print("✅ All tests passed!")


if __name__ == "__main__":
    demo()
