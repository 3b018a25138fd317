"""
Tests for report form state transitions
"""
import pytest

import sys
sys.path.insert(0, '.')

from src.core.constants import DisasterCategory
from src.reporting.form_state import (
    FormState,
    SubmissionPhase,
    select_category,
    set_description,
    set_location,
    add_image,
    remove_image,
    clear_form,
    begin_submission,
    finish_submission,
)


class TestFormState:
    """Test suite for form state values."""

    def test_initial_state(self):
        """Test a fresh form is empty and idle."""
        state = FormState()

        assert state.category is None
        assert state.description == ""
        assert state.location == ""
        assert state.images == ()
        assert state.phase == SubmissionPhase.IDLE
        assert state.loading == False

    def test_transitions_do_not_mutate(self):
        """Test transitions return new values."""
        state = FormState()
        updated = set_description(state, "Water rising fast")

        assert state.description == ""
        assert updated.description == "Water rising fast"

    def test_select_category_from_string(self):
        """Test picker values map to categories."""
        state = select_category(FormState(), "Flood")
        assert state.category == DisasterCategory.FLOOD

    def test_select_empty_category_clears(self):
        """Test the prompt option clears the selection."""
        state = select_category(FormState(), DisasterCategory.FIRE)
        state = select_category(state, "")
        assert state.category is None

    def test_select_unknown_category(self):
        """Test values outside the picker are rejected."""
        with pytest.raises(ValueError):
            select_category(FormState(), "Earthquake")

    def test_set_location(self):
        """Test location update."""
        state = set_location(FormState(), "Barangay 5, Tacloban")
        assert state.location == "Barangay 5, Tacloban"


class TestImageList:
    """Test attachment list operations."""

    def setup_method(self):
        """Setup test fixtures."""
        self.state = FormState()
        for uri in ["file:///a.jpg", "file:///b.jpg", "file:///c.png", "file:///d.jpg"]:
            self.state = add_image(self.state, uri)

    def test_add_appends_in_order(self):
        """Test images keep insertion order."""
        assert self.state.images == (
            "file:///a.jpg", "file:///b.jpg", "file:///c.png", "file:///d.jpg"
        )

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_remove_preserves_order(self, index):
        """Test removing any position keeps the rest in order."""
        expected = list(self.state.images)
        del expected[index]

        result = remove_image(self.state, index)

        assert list(result.images) == expected

    def test_remove_first_of_two(self):
        """Test deleting index 0 of two leaves the second image."""
        state = add_image(add_image(FormState(), "file:///one.jpg"), "file:///two.jpg")
        state = remove_image(state, 0)
        assert state.images == ("file:///two.jpg",)

    def test_remove_out_of_range(self):
        """Test unknown positions leave the list unchanged."""
        assert remove_image(self.state, 10).images == self.state.images
        assert remove_image(self.state, -1).images == self.state.images

    def test_duplicate_uris_removed_by_position(self):
        """Test only the addressed copy is removed."""
        state = add_image(add_image(FormState(), "file:///x.jpg"), "file:///x.jpg")
        assert remove_image(state, 1).images == ("file:///x.jpg",)


class TestSubmissionPhase:
    """Test submission phase transitions."""

    def test_begin_and_finish(self):
        """Test loading flag follows the phase."""
        state = begin_submission(FormState())
        assert state.loading == True

        state = finish_submission(state)
        assert state.loading == False

    def test_clear_keeps_phase(self):
        """Test clearing fields does not end a submission."""
        state = set_description(begin_submission(FormState()), "Fire near school")
        state = add_image(state, "file:///fire.jpg")

        cleared = clear_form(state)

        assert cleared.description == ""
        assert cleared.images == ()
        assert cleared.loading == True
