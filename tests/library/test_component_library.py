"""
Tests for ComponentLibrary lookup and result enrichment.
"""

import pytest

from edgy.knowledge.domain.models import DEFAULT_LIBRARY_FILE_BASE
from edgy.library.component_library import ComponentLibrary
from edgy.library.models import LibraryMatch
from tests.helpers.builders import make_screen


@pytest.fixture
def library(knowledge_base):
    return ComponentLibrary(knowledge_base)


class TestLookup:
    """Test resolving suggested names to library entries."""

    @pytest.mark.parametrize(
        "suggested, expected",
        [
            ("Button (loading)", "Button"),
            ("Input (error)", "Input"),
            ("Alert (error)", "Alert"),
            ("Skeleton", "Skeleton"),
            ("badge", "Badge"),
            ("Snackbar message", "Toast"),
        ],
    )
    def test_resolves_names(self, library, suggested, expected):
        assert library.find_component_info(suggested).name == expected

    def test_first_alias_match_wins(self, library):
        """'alertdialog' contains the Alert alias 'alert', and Alert comes first."""
        assert library.find_component_info("AlertDialog").name == "Alert"

    def test_unknown_name(self, library):
        assert library.find_component_info("EmptyState") is None
        assert library.find_component_link("EmptyState") is None

    def test_link_url(self, library):
        link = library.find_component_link("Button (loading)")

        assert link.name == "Button"
        assert link.url == DEFAULT_LIBRARY_FILE_BASE + "13-1070"

    def test_status(self, library):
        status = library.status()

        assert status["available"] == 10
        assert status["components"][0] == "Alert"


class TestMatches:
    """Test LibraryMatch construction and serialization."""

    def test_unresolved_match_degrades_to_name(self, library):
        match = library.match("EmptyState")

        assert match == LibraryMatch(name="EmptyState")
        assert not match.resolved
        assert match.to_json() == {"name": "EmptyState"}

    def test_resolved_match_json(self, library):
        payload = library.match("Input (error)").to_json()

        assert payload == {
            "name": "Input (error)",
            "libraryUrl": DEFAULT_LIBRARY_FILE_BASE + "13-1256",
            "libraryName": "Input",
        }


class TestEnrichment:
    """Test enriching finished analyses."""

    def test_enrich_result(self, library, analyzer, login_screen):
        result = analyzer.analyze([login_screen])

        screens = library.enrich_result(result)

        issue = screens[0].issues[0]
        assert [m.library_name for m in issue.library_matches] == ["Alert", "Input"]
        assert issue.to_json()["libraryMatches"][1]["libraryName"] == "Input"
        assert screens[0].missing_states == result.screens[0].missing_states

    def test_enrichment_leaves_result_untouched(self, library, analyzer, login_screen):
        result = analyzer.analyze([login_screen])
        before = result.to_json()

        library.enrich_result(result)

        assert result.to_json() == before
        assert "libraryMatches" not in before["screens"][0]["issues"][0]

    def test_unknown_components_do_not_abort(self, library, analyzer):
        result = analyzer.analyze([make_screen("1", "Search Results", ["Query Field"])])

        screens = library.enrich_result(result)

        matches = [m for i in screens[0].issues for m in i.library_matches]
        assert LibraryMatch(name="EmptyState") in matches

    def test_components_needed(self, library, analyzer, login_screen):
        result = analyzer.analyze([login_screen])

        needed = library.components_needed(result)

        assert [s.component.name for s in needed] == ["Alert", "Input", "Button", "Toast"]
        assert needed[0].issues == ["Validation Error State", "Success Confirmation"]
