from webrev.core.parsing.header import TableCursor, extract_header


def _counting(lines: list[str], consumed: list[str]):
    for line in lines:
        consumed.append(line)
        yield line


class TestExtractHeader:
    def test_extracts_rows_inside_table(self) -> None:
        lines = [
            "<html>",
            "<table>",
            "<tr><th>Branch:</th><td>master</td></tr>",
            "<tr><th>Prepared by:</th><td>alice alice@example.com</td></tr>",
            "</table>",
        ]

        header = extract_header(lines)

        assert header == {
            "Branch": "master",
            "Prepared by": "alice alice@example.com",
        }

    def test_ignores_rows_outside_table(self) -> None:
        lines = [
            "<tr><th>Branch:</th><td>before</td></tr>",
            "<table>",
            "<tr><th>Workspace:</th><td>/ws</td></tr>",
            "</table>",
            "<tr><th>Branch:</th><td>after</td></tr>",
        ]

        assert extract_header(lines) == {"Workspace": "/ws"}

    def test_missing_table_yields_empty_mapping(self) -> None:
        lines = ["<html>", "<tr><th>Branch:</th><td>master</td></tr>", "</html>"]

        assert extract_header(lines) == {}

    def test_empty_document_yields_empty_mapping(self) -> None:
        assert extract_header([]) == {}

    def test_drops_non_matching_rows(self) -> None:
        lines = [
            "<table>",
            "<tr><td>no header cell</td></tr>",
            "<tr><th>No colon</th><td>value</td></tr>",
            "<tr><th>Branch:</th><td>jdk17</td></tr>",
            "</table>",
        ]

        assert extract_header(lines) == {"Branch": "jdk17"}

    def test_last_duplicate_wins(self) -> None:
        lines = [
            "<table>",
            "<tr><th>Branch:</th><td>first</td></tr>",
            "<tr><th>Branch:</th><td>second</td></tr>",
            "</table>",
        ]

        assert extract_header(lines) == {"Branch": "second"}

    def test_tolerates_whitespace_between_cells(self) -> None:
        lines = [
            "<table>",
            "<tr> <th>Compare against:</th>  <td>origin/master</td> </tr>",
            "</table>",
        ]

        assert extract_header(lines) == {"Compare against": "origin/master"}

    def test_strips_line_terminators(self) -> None:
        lines = [
            "<table>\r\n",
            "<tr><th>Branch:</th><td>master</td></tr>\r\n",
            "</table>\r\n",
        ]

        assert extract_header(lines) == {"Branch": "master"}

    def test_keeps_markup_in_values(self) -> None:
        lines = [
            "<table>",
            '<tr><th>Patch of changes:</th><td><a href="foo.patch">foo.patch</a></td></tr>',
            "</table>",
        ]

        header = extract_header(lines)

        assert header["Patch of changes"] == '<a href="foo.patch">foo.patch</a>'


class TestTableCursor:
    def test_stops_reading_after_closing_tag(self) -> None:
        consumed: list[str] = []
        lines = ["<p>", "<table>", "<tr>", "</table>", "rest", "more"]

        rows = list(TableCursor(_counting(lines, consumed)))

        assert rows == ["<table>", "<tr>"]
        assert consumed == ["<p>", "<table>", "<tr>", "</table>"]

    def test_is_single_pass(self) -> None:
        cursor = TableCursor(["<table>", "<tr>", "</table>"])

        assert list(cursor) == ["<table>", "<tr>"]
        assert list(cursor) == []

    def test_unterminated_table_runs_to_end(self) -> None:
        assert list(TableCursor(["<table>", "a", "b"])) == ["<table>", "a", "b"]
