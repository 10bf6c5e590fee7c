import pytest

from webrev.core.exceptions import MalformedLocationError
from webrev.core.parsing.metadata import parse_author, parse_metadata, parse_summary
from webrev.core.schema.metadata import WebrevMetadata, WebrevStats
from tests.pages import WEBREV_URI

FULL_HEADER = {
    "Patch of changes": '<a href="x">foo.patch</a>',
    "Changeset": '<a href="y">foo.changeset</a>',
    "Prepared by": "alice foo@example.com",
    "Summary of changes": "12 lines changed: 8 ins; 2 del; 2 mod; 0 unchg",
    "Branch": "jdk17u",
    "Workspace": "/home/alice/jdk",
    "Repository": "https://github.com/openjdk/jdk",
    "Compare against": "origin/master",
    "Compare against version": "jdk-17+35",
    "Compare against revision": "0123456789abcdef0123456789abcdef01234567",
}


class TestParseMetadata:
    def test_example_webrev(self) -> None:
        header = {
            "Patch of changes": '<a href="x">foo.patch</a>',
            "Prepared by": "alice foo@example.com",
            "Summary of changes": "12 lines changed: 8 ins; 2 del; 2 mod; 0 unchg",
        }

        metadata = parse_metadata(header, "http://example.com/webrev/")

        assert metadata.patch_uri == "http://example.com/webrev/foo.patch"
        assert metadata.author == "alice"
        assert metadata.summary == WebrevStats(
            insertions=8, deletions=2, modifications=2, lines_changed=12
        )
        assert metadata.changeset_uri is None
        assert metadata.branch is None

    def test_all_fields(self) -> None:
        metadata = parse_metadata(FULL_HEADER, WEBREV_URI)

        assert metadata == WebrevMetadata(
            source_uri=WEBREV_URI,
            branch="jdk17u",
            author="alice",
            summary=WebrevStats(8, 2, 2, 12),
            workspace="/home/alice/jdk",
            repository_uri="https://github.com/openjdk/jdk",
            compare_against="origin/master",
            compare_against_version="jdk-17+35",
            compare_against_revision="0123456789abcdef0123456789abcdef01234567",
            patch_uri=WEBREV_URI + "foo.patch",
            changeset_uri=WEBREV_URI + "foo.changeset",
        )

    def test_empty_header(self) -> None:
        assert parse_metadata({}, WEBREV_URI) == WebrevMetadata(source_uri=WEBREV_URI)

    @pytest.mark.parametrize(
        ("key", "field"),
        [
            ("Patch of changes", "patch_uri"),
            ("Changeset", "changeset_uri"),
            ("Prepared by", "author"),
            ("Summary of changes", "summary"),
            ("Branch", "branch"),
            ("Workspace", "workspace"),
            ("Repository", "repository_uri"),
            ("Compare against", "compare_against"),
            ("Compare against version", "compare_against_version"),
            ("Compare against revision", "compare_against_revision"),
        ],
    )
    def test_missing_key_only_affects_its_field(self, key: str, field: str) -> None:
        complete = parse_metadata(FULL_HEADER, WEBREV_URI)
        header = {k: v for k, v in FULL_HEADER.items() if k != key}

        partial = parse_metadata(header, WEBREV_URI)

        assert getattr(partial, field) is None
        for name in WebrevMetadata.__dataclass_fields__:
            if name != field:
                assert getattr(partial, name) == getattr(complete, name)

    def test_link_text_not_href_is_resolved(self) -> None:
        header = {"Patch of changes": '<a href="elsewhere/x.patch">jdk.patch</a>'}

        metadata = parse_metadata(header, WEBREV_URI)

        assert metadata.patch_uri == WEBREV_URI + "jdk.patch"

    def test_non_matching_patch_link_is_absent(self) -> None:
        header = {
            "Patch of changes": "jdk.patch",
            "Changeset": '<a href="jdk.zip">jdk.zip</a>',
        }

        metadata = parse_metadata(header, WEBREV_URI)

        assert metadata.patch_uri is None
        assert metadata.changeset_uri is None

    def test_unresolvable_link_text_is_absent(self) -> None:
        header = {"Patch of changes": '<a href="x">my change.patch</a>'}

        assert parse_metadata(header, WEBREV_URI).patch_uri is None

    def test_patch_uri_is_stable(self) -> None:
        first = parse_metadata(FULL_HEADER, WEBREV_URI)
        second = parse_metadata(FULL_HEADER, WEBREV_URI)

        assert first.patch_uri == second.patch_uri
        assert first == second

    def test_malformed_summary_is_absent(self) -> None:
        header = dict(FULL_HEADER, **{"Summary of changes": "lots of changes"})

        metadata = parse_metadata(header, WEBREV_URI)

        assert metadata.summary is None
        assert metadata.author == "alice"

    def test_malformed_repository_raises(self) -> None:
        header = dict(FULL_HEADER, Repository="https://github.com/open jdk/jdk")

        with pytest.raises(MalformedLocationError) as info:
            parse_metadata(header, WEBREV_URI)
        assert info.value.location == "https://github.com/open jdk/jdk"

    def test_branch_is_kept_verbatim(self) -> None:
        header = {"Branch": " feature/JDK-8123456 "}

        assert parse_metadata(header, WEBREV_URI).branch == " feature/JDK-8123456 "


class TestParseSummary:
    def test_plural(self) -> None:
        assert parse_summary("40 lines changed: 10 ins; 20 del; 5 mod; 1000 unchg") == (
            WebrevStats(insertions=10, deletions=20, modifications=5, lines_changed=40)
        )

    def test_singular(self) -> None:
        assert parse_summary("1 line changed: 1 ins; 0 del; 0 mod; 99 unchg") == (
            WebrevStats(insertions=1, deletions=0, modifications=0, lines_changed=1)
        )

    def test_total_is_not_recomputed(self) -> None:
        stats = parse_summary("7 lines changed: 100 ins; 200 del; 300 mod; 0 unchg")

        assert stats is not None
        assert stats.lines_changed == 7
        assert stats.insertions + stats.deletions + stats.modifications == 600

    def test_embedded_in_markup(self) -> None:
        stats = parse_summary("<b>3 lines changed: 1 ins; 1 del; 1 mod; 2 unchg</b>")

        assert stats == WebrevStats(1, 1, 1, 3)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "12 lines changed",
            "12 lines changed: 8 ins; 2 del; 2 mod",
            "twelve lines changed: 8 ins; 2 del; 2 mod; 0 unchg",
            "12 lines changed: 8 ins, 2 del, 2 mod, 0 unchg",
        ],
    )
    def test_non_matching_text(self, text: str) -> None:
        assert parse_summary(text) is None


class TestParseAuthor:
    def test_first_token(self) -> None:
        assert parse_author("alice alice@example.com") == "alice"

    def test_single_token(self) -> None:
        assert parse_author("bob") == "bob"

    def test_blank_value_is_absent(self) -> None:
        assert parse_author("   ") is None

    def test_missing_value_is_absent(self) -> None:
        assert parse_author(None) is None
